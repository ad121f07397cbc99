class FormatoInvalido(ValueError):
    """
    Base ou CNPJ com tamanho errado, caractere fora de [0-9A-Z]
    ou letra proibida (I, O, U, Q, F).
    """
