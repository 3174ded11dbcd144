from axion.utils.formatting import format_brl, format_percent, format_period

def test_format_brl():
    assert format_brl(150000.5) == "R$ 150.000,50"
    assert format_brl(-1234.5) == "-R$ 1.234,50"
    assert format_brl(0) == "R$ 0,00"

def test_format_brl_tiny_negative_is_zero():
    assert format_brl(-0.001) == "R$ 0,00"
    assert format_brl(-0.004) == "R$ 0,00"
    assert format_brl(-0.006) == "-R$ 0,01"

def test_format_percent_and_period():
    assert format_percent(15) == "15,0%"
    assert format_percent(33.333, 0) == "33%"
    assert format_period("2024-03-01", "2024-03-31T10:00:00") == "01/03/2024 a 31/03/2024"
