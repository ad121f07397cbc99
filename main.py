from fastapi import FastAPI, Form
from fastapi.responses import FileResponse, JSONResponse
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware import Middleware
from pydantic import ValidationError
from logging_config import configure_logging
from modelos.requisicao import RequisicaoCNPJ, RespostaErro
from utils.erros import FormatoInvalido
from utils import cnpj as cnpj_utils
from pathlib import Path
import logging
import config


# Logger para este módulo
logger = logging.getLogger(__name__)

configure_logging(
    log_dir=config.LOG_DIR,
    audit_filename="audit.log",
    error_filename="errors.log",
    backup_count=config.LOG_BACKUP_COUNT,
    log_level=config.LOG_LEVEL,
)

PAGINA_FORMULARIO = Path(__file__).resolve().parent / "static" / "index.html"

# ─────────────────────────────────────────────────────────────────────────────
# Configuração do FastAPI e CORS
# ─────────────────────────────────────────────────────────────────────────────

# noinspection PyTypeChecker
middleware = [
    Middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["POST", "GET"],
        allow_headers=["*"],
    )
]

app = FastAPI(
    title="API de CNPJ Alfanumérico",
    version="1.0",
    description="Geração, validação e cálculo de dígitos verificadores do CNPJ alfanumérico",
    middleware=middleware,
)


def resposta_erro(mensagem: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=RespostaErro(message=mensagem).model_dump(),
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """
        Verificação da API, se está rodando.
    """
    return {"status": "ok"}


@app.get("/", tags=["Formulário"], include_in_schema=False)
async def formulario():
    """
        Página com o formulário de validação e geração de CNPJ.
    """
    return FileResponse(PAGINA_FORMULARIO, media_type="text/html")


@app.post("/processa_cnpj", tags=["CNPJ"])
async def processa_cnpj(acao: str = Form(""), cnpj: str = Form("")):
    """
    Rota chamada pelo formulário. Campos:
      - acao: gerarCNPJ, validar ou gerarDV
      - cnpj: CNPJ com ou sem máscara (ignorado em gerarCNPJ)
    """
    try:
        requisicao = RequisicaoCNPJ(acao=acao, cnpj=cnpj)
    except ValidationError as e:
        for err in e.errors():
            campo = "geral" if not err["loc"] else " -> ".join(str(loc) for loc in err["loc"])
            logger.warning(f"Requisição rejeitada | Campo: {campo} | Erro: {err['msg']}")
        return resposta_erro("Ação inválida", 400)

    logger.info(f"Recebida ação {requisicao.acao}.")

    if requisicao.acao == "gerarCNPJ":
        return {"status": "success", "cnpj": cnpj_utils.gerar()}

    if requisicao.acao == "validar":
        valido = cnpj_utils.validar(requisicao.cnpj, aceitar_sem_mascara=config.ACEITAR_SEM_MASCARA)
        return {
            "status": "success",
            "valid": valido,
            "message": "CNPJ válido" if valido else "CNPJ inválido",
        }

    try:
        dv = cnpj_utils.gerar_dv(requisicao.cnpj)
    except FormatoInvalido as e:
        logger.warning(f"gerarDV com CNPJ malformado {requisicao.cnpj!r}: {e}")
        return resposta_erro(str(e), 422)
    return {"status": "success", "dv": dv}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=config.API_HOST, port=config.API_PORT, log_level=config.LOG_LEVEL.lower())
