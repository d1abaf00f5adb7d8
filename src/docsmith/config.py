import os
from dotenv import load_dotenv

# Load environment variables from a .env file
load_dotenv(override=True)

# --- API Keys ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
PINECONE_API_KEY = os.getenv("PINECONE_API_KEY")

# --- Pinecone ---
PINECONE_INDEX_NAME = os.getenv("PINECONE_INDEX_NAME", "docsmith-index")
PINECONE_CLOUD = os.getenv("PINECONE_CLOUD", "aws")
PINECONE_REGION = os.getenv("PINECONE_REGION", "us-east-1")

# --- Object storage ---
AWS_REGION = os.getenv("AWS_REGION")
UPLOAD_BUCKET = os.getenv("UPLOAD_BUCKET")
UPLOAD_PREFIX = "uploads/"
RESULTS_PREFIX = "results/"
UPLOAD_URL_TTL = 300     # seconds
DOWNLOAD_URL_TTL = 600   # seconds

# --- Models ---
EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "text-embedding-3-small")
EMBEDDING_DIMENSION = int(os.getenv("EMBEDDING_DIMENSION", "1536"))
OPENAI_CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
INTENT_MODEL = os.getenv("INTENT_MODEL", "gpt-4o-mini")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

# --- Generated files ---
# TTF used for generated PDFs; unset keeps Helvetica (Latin-1 only)
PDF_FONT_PATH = os.getenv("PDF_FONT_PATH")

# --- Retrieval ---
CHUNK_SIZE = 1500        # characters
TOP_K = 3

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"
QUIET_LOGGERS = ["httpx", "openai", "urllib3", "botocore"]

# --- Prompt Configuration ---
PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
PROMPT_PATH = os.path.join(PACKAGE_ROOT, "prompts.yml")
