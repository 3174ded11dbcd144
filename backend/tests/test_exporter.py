import openpyxl

from axion.services.exports.exporter import export_dre_pdf, export_dre_xlsx
from axion.services.reports.service import dre_rows, _category_rows

def _dre():
    k = dict(
        revenue=2000.0, operational_cost=1500.0, tax_rate=15.0, tax_amount=300.0, net_profit=200.0,
        card_revenue=2000.0, transaction_income=0.0, transaction_expenses=300.0, proration_factor=1.0,
        fixed_cost=1000.0, commission_paid=200.0, traffic_costs=0.0, traffic_roi=0.0,
    )
    return dict(
        company_name="Acme",
        period_label="01/03/2024 a 31/03/2024",
        rows=dre_rows(k),
        expenses_by_category=_category_rows({"Marketing": 300.0}),
    )

def test_export_pdf(tmp_path):
    out = export_dre_pdf(_dre(), tmp_path / "out" / "dre.pdf")
    assert out.exists()
    assert out.read_bytes()[:4] == b"%PDF"

def test_export_xlsx(tmp_path):
    out = export_dre_xlsx(_dre(), tmp_path / "dre.xlsx")
    wb = openpyxl.load_workbook(out, data_only=True)
    assert wb.sheetnames == ["dre", "despesas"]
    ws = wb["dre"]
    assert [c.value for c in ws[1]] == ["linha", "valor"]
    assert ws.cell(row=2, column=1).value == "Receita Bruta"
    assert ws.cell(row=2, column=2).value == 2000
    assert ws.cell(row=5, column=2).value == 200
    exp = wb["despesas"]
    assert [c.value for c in exp[2]] == ["Marketing", 300, 100]
