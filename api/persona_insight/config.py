import os

SCORING_STRATEGY = os.getenv("SCORING_STRATEGY", "corpus").strip().lower()
SIMULATED_LATENCY_SECONDS = float(os.getenv("SIMULATED_LATENCY_SECONDS", "1.5"))

CORPUS_TOP_K = int(os.getenv("CORPUS_TOP_K", "5"))
SIMILAR_PROFILE_COUNT = int(os.getenv("SIMILAR_PROFILE_COUNT", "3"))
EVIDENCE_QUOTE_COUNT = int(os.getenv("EVIDENCE_QUOTE_COUNT", "3"))

SPACY_MODEL = os.getenv("SPACY_MODEL", "en_core_web_sm")

MAX_TEXT_CHARS = int(os.getenv("MAX_TEXT_CHARS", "200000"))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024)))

RL_ANALYZE_LIMIT = int(os.getenv("RL_ANALYZE_LIMIT", "60"))
RL_WINDOW_SECONDS = int(os.getenv("RL_WINDOW_SECONDS", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
