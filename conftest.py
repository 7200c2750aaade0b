import os
import tempfile

# db.py requires DATABASE_URL at import; tests never touch a real database
_TEST_DB_DIR = tempfile.mkdtemp(prefix="career-matching-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ.setdefault("LOG_LEVEL", "WARNING")
