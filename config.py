import os

# ─── Logs ────────────────────────────────────
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", 30))  # nº de dias de log guardados após a rotação

# ─── API ─────────────────────────────────────
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# ─── Validação ───────────────────────────────
# false: só aceita CNPJ com máscara XX.XXX.XXX/XXXX-DD na validação
ACEITAR_SEM_MASCARA = os.getenv("CNPJ_ACEITAR_SEM_MASCARA", "true").strip().lower() in ("1", "true", "sim", "yes")
