import datetime as dt
from pathlib import Path
import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import mm

from axion.core.config import settings
from axion.utils.formatting import format_brl, format_percent

TONE_COLORS = {
    "default": colors.black,
    "muted": colors.HexColor("#6b7280"),
    "success": colors.HexColor("#16a34a"),
    "warning": colors.HexColor("#d97706"),
    "destructive": colors.HexColor("#dc2626"),
}

MAIN_ROWS = 4

def export_dre_xlsx(dre: dict, out_path: Path):
    df_rows = pd.DataFrame(
        [{"linha": r["label"], "valor": r["amount"]} for r in dre["rows"]],
        columns=["linha", "valor"],
    )
    df_exp = pd.DataFrame(dre["expenses_by_category"], columns=["name", "amount", "percentage"]).rename(
        columns={"name": "categoria", "amount": "valor", "percentage": "percentual"}
    )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(out_path, engine="xlsxwriter") as w:
        df_rows.to_excel(w, index=False, sheet_name="dre")
        df_exp.to_excel(w, index=False, sheet_name="despesas")
    return out_path

def export_dre_pdf(dre: dict, out_path: Path):
    out_path.parent.mkdir(parents=True, exist_ok=True)
    c = canvas.Canvas(str(out_path), pagesize=A4)
    width, height = A4
    y = height - 20*mm
    c.setFont("Helvetica-Bold", 14)
    c.drawString(20*mm, y, f"DRE - {dre['company_name']}")
    y -= 7*mm
    c.setFont("Helvetica", 10)
    c.drawString(20*mm, y, dre["period_label"])
    c.drawRightString(width - 20*mm, y, dt.datetime.now().strftime("%d/%m/%Y %H:%M"))
    y -= 12*mm

    for i, row in enumerate(dre["rows"]):
        if i == MAIN_ROWS:
            y -= 4*mm
            c.setFont("Helvetica-Bold", 9)
            c.setFillColor(TONE_COLORS["muted"])
            c.drawString(20*mm, y, "DETALHAMENTO")
            y -= 7*mm
        key_row = i in (0, MAIN_ROWS - 1)
        c.setFont("Helvetica-Bold" if key_row else "Helvetica", 11)
        c.setFillColor(TONE_COLORS["muted"] if row["tone"] == "muted" else colors.black)
        c.drawString(20*mm, y, row["label"])
        c.setFillColor(TONE_COLORS.get(row["tone"], colors.black))
        c.drawRightString(width - 20*mm, y, row["value"])
        y -= 7*mm

    if dre["expenses_by_category"]:
        y -= 4*mm
        c.setFont("Helvetica-Bold", 9)
        c.setFillColor(TONE_COLORS["muted"])
        c.drawString(20*mm, y, "DESPESAS POR CATEGORIA")
        y -= 7*mm
        c.setFont("Helvetica", 10)
        for item in dre["expenses_by_category"]:
            if y < 25*mm:
                c.showPage()
                y = height - 20*mm
                c.setFont("Helvetica", 10)
            c.setFillColor(colors.black)
            c.drawString(20*mm, y, f"{item['name']} ({format_percent(item['percentage'], 0)})")
            c.drawRightString(width - 20*mm, y, format_brl(item["amount"]))
            y -= 6*mm

    c.setFont("Helvetica", 8)
    c.setFillColor(TONE_COLORS["muted"])
    c.drawString(20*mm, 12*mm, "Gerado pelo Axion")
    c.drawRightString(width - 20*mm, 12*mm, f"Valores em {settings.DEFAULT_CURRENCY}")
    c.showPage()
    c.save()
    return out_path

def default_export_path(prefix: str, ext: str) -> Path:
    ts = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
    return Path(settings.EXPORT_DIR) / f"{prefix}_{ts}.{ext}"
