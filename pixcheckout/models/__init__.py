def format_brl(centavos: int) -> str:
    """Format centavos as BRL string: 285000 -> 'R$ 2.850,00'"""
    reais = centavos / 100
    formatted = f"{reais:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {formatted}"


def only_digits(text: str) -> str:
    """Strip everything but digits: '(11) 99999-9999' -> '11999999999'"""
    return "".join(c for c in text if c.isdigit())
