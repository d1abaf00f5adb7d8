"""In-memory stand-ins for the Pinecone client and index."""

from types import SimpleNamespace


class FakeIndex:
    def __init__(self, matches=None, fail_on=None):
        self.vectors = {}
        self.upsert_calls = []
        self.delete_calls = []
        self.query_calls = []
        self.matches = matches
        self.fail_on = fail_on or set()

    def _maybe_fail(self, op):
        if op in self.fail_on:
            raise RuntimeError(f"pinecone {op} unavailable")

    def upsert(self, vectors):
        self._maybe_fail("upsert")
        self.upsert_calls.append(list(vectors))
        for v in vectors:
            self.vectors[v["id"]] = v

    def query(self, vector, top_k, include_metadata):
        self._maybe_fail("query")
        self.query_calls.append({"vector": vector, "top_k": top_k, "include_metadata": include_metadata})
        if self.matches is not None:
            found = self.matches
        else:
            found = [
                SimpleNamespace(id=v["id"], score=1.0, metadata=v["metadata"])
                for v in self.vectors.values()
            ]
        return SimpleNamespace(matches=found[:top_k])

    def describe_index_stats(self):
        self._maybe_fail("describe")
        return SimpleNamespace(total_vector_count=len(self.vectors))

    def delete(self, delete_all=False):
        self._maybe_fail("delete")
        self.delete_calls.append(delete_all)
        if delete_all:
            self.vectors.clear()


class _IndexList:
    def __init__(self, names):
        self._names = names

    def names(self):
        return list(self._names)


class FakePineconeClient:
    def __init__(self, existing=()):
        self.existing = list(existing)
        self.created = []
        self.index = FakeIndex()

    def list_indexes(self):
        return _IndexList(self.existing)

    def create_index(self, name, dimension, metric, spec):
        self.created.append({"name": name, "dimension": dimension, "metric": metric, "spec": spec})
        self.existing.append(name)

    def Index(self, name):
        return self.index
