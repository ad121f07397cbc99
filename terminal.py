from logging_config import configure_logging
from utils.erros import FormatoInvalido
from utils import cnpj as cnpj_utils
import argparse
import logging
import config

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cnpj-alfanumerico",
        description="Gera e valida CNPJs alfanuméricos e calcula seus dígitos verificadores",
    )
    opcoes = parser.add_mutually_exclusive_group(required=True)
    opcoes.add_argument('-g', '--gerar', action='store_true',
                        help="Gerar CNPJ completo")
    opcoes.add_argument('-dv', '--digito-verificador', metavar='CNPJ',
                        help="Gerar dígito verificador para o CNPJ fornecido")
    opcoes.add_argument('-v', '--validar', metavar='CNPJ',
                        help="Validar um CNPJ completo")
    return parser


def main(argv=None):
    """
    Retorna 0 em sucesso (ou CNPJ válido) e 1 para CNPJ inválido ou malformado.
    Erros de uso saem com 2 pelo próprio argparse.
    """
    args = build_parser().parse_args(argv)
    configure_logging(log_dir=None, log_level=config.LOG_LEVEL)

    try:
        if args.gerar:
            print(f"CNPJ Gerado: {cnpj_utils.gerar()}")
            return 0

        if args.digito_verificador is not None:
            print(f"Dígito Verificador: {cnpj_utils.gerar_dv(args.digito_verificador)}")
            return 0

        if cnpj_utils.validar(args.validar, aceitar_sem_mascara=config.ACEITAR_SEM_MASCARA):
            print("CNPJ Válido")
            return 0
        print("CNPJ Inválido")
        return 1

    except FormatoInvalido as e:
        logger.warning(f"Entrada rejeitada: {e}")
        print(f"Erro: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
