"""In-memory stand-ins for S3."""

import io


class FakeStorage:
    """Implements the S3Storage interface over a dict."""

    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.content_types = {}
        self.deleted = []
        self.presigned = []

    def presign_upload(self, key, content_type, expires_in=300):
        self.presigned.append(("put", key, expires_in))
        return f"https://bucket.example/{key}?op=put&expires={expires_in}"

    def presign_download(self, key, expires_in=600):
        self.presigned.append(("get", key, expires_in))
        return f"https://bucket.example/{key}?op=get&expires={expires_in}"

    def list_keys(self, prefix):
        return [k for k in self.objects if k.startswith(prefix)]

    def get_bytes(self, key):
        return self.objects[key]

    def put_bytes(self, key, body, content_type):
        self.objects[key] = body
        self.content_types[key] = content_type

    def delete(self, key):
        self.deleted.append(key)
        self.objects.pop(key, None)


class _FakePaginator:
    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def paginate(self, **kwargs):
        self.calls.append(kwargs)
        return iter(self.pages)


class FakeS3Client:
    """Records the boto3 S3 client calls made by S3Storage."""

    def __init__(self, pages=None, objects=None):
        self.paginator = _FakePaginator(pages or [])
        self.objects = dict(objects or {})
        self.calls = []

    def generate_presigned_url(self, operation, Params, ExpiresIn):
        self.calls.append(("generate_presigned_url", operation, Params, ExpiresIn))
        return f"https://s3.example/{Params['Key']}?op={operation}"

    def get_paginator(self, name):
        self.calls.append(("get_paginator", name))
        return self.paginator

    def get_object(self, Bucket, Key):
        self.calls.append(("get_object", Bucket, Key))
        return {"Body": io.BytesIO(self.objects[Key])}

    def put_object(self, Bucket, Key, Body, ContentType):
        self.calls.append(("put_object", Bucket, Key, ContentType))
        self.objects[Key] = Body

    def delete_object(self, Bucket, Key):
        self.calls.append(("delete_object", Bucket, Key))
        self.objects.pop(Key, None)
