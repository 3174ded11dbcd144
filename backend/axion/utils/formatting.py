"""
Formatação de valores para relatórios (BRL, percentuais, períodos).
"""
import datetime as dt


def format_brl(value: float) -> str:
    """Formata um número como Real brasileiro (R$ 150.000,50)."""
    # arredonda antes do sinal; "+ 0.0" troca -0.0 por 0.0
    value = round(value, 2) + 0.0
    if value >= 0:
        return f"R$ {value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"-R$ {abs(value):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_percent(value: float, decimals: int = 1) -> str:
    """Formata um número como percentual (ex: 23,5%)."""
    return f"{value:.{decimals}f}%".replace(".", ",")


def format_period(start: str, end: str) -> str:
    """'2024-03-01', '2024-03-31' -> '01/03/2024 a 31/03/2024'."""
    d1 = dt.date.fromisoformat(start[:10])
    d2 = dt.date.fromisoformat(end[:10])
    return f"{d1:%d/%m/%Y} a {d2:%d/%m/%Y}"
