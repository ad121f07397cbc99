from pathlib import Path
import os
import sys
import tempfile

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# main.py configura os logs em arquivo ao ser importado
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="cnpj-logs-"))
