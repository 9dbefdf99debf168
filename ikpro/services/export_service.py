# -*- coding: utf-8 -*-
"""Dışa aktarımlar (Excel/PDF).

openpyxl/reportlab bağımlılıklarını tek noktada toplamak için.
`target` bir dosya yolu ya da yazılabilir bir dosya nesnesi (BytesIO) olabilir.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from ..utils import ensure_pdf_fonts, fmt_currency, fmt_tr_date


class ExportService:
    def export_import_template_xlsx(self, fields: Sequence[Any], sample: Dict[str, Any], target) -> None:
        """İçe aktarım şablonu: 'Şablon' (başlık + örnek satır) ve 'Alan Açıklamaları'."""
        from openpyxl import Workbook
        from openpyxl.styles import Font, PatternFill
        from openpyxl.utils import get_column_letter

        wb = Workbook()
        ws = wb.active
        ws.title = "Şablon"
        ws.append([f.label for f in fields])
        ws.append([sample.get(f.key, "") for f in fields])

        header_fill = PatternFill("solid", fgColor="DDEBF7")
        for i, f in enumerate(fields, start=1):
            cell = ws.cell(row=1, column=i)
            cell.font = Font(bold=True)
            cell.fill = header_fill
            ws.column_dimensions[get_column_letter(i)].width = min(32, max(14, len(f.label) + 4))
        ws.freeze_panes = "A2"

        ws_help = wb.create_sheet("Alan Açıklamaları")
        ws_help.append(["Alan", "Zorunlu", "Tip", "Seçenekler"])
        for c in range(1, 5):
            ws_help.cell(row=1, column=c).font = Font(bold=True)
        for f in fields:
            ws_help.append([
                f.label,
                "Evet" if f.required else "Hayır",
                f.type,
                ", ".join(f.options) if f.options else "",
            ])
        for col, width in zip("ABCD", (24, 10, 10, 40)):
            ws_help.column_dimensions[col].width = width

        wb.save(target)

    def export_payslip_pdf(self, data: Dict[str, Any], target) -> None:
        """Bordro (maaş pusulası) PDF'i.

        data: PayrollService.get çıktısı + 'company_name'
        """
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import getSampleStyleSheet
        from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

        doc = SimpleDocTemplate(target, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
        font_reg, font_bold = ensure_pdf_fonts()

        styles = getSampleStyleSheet()
        for k in ("Normal", "Title", "Heading2"):
            if k in styles:
                styles[k].fontName = (font_bold if k != "Normal" else font_reg)

        story = []
        story.append(Paragraph(f"<b>Bordro</b> - {data['month']}", styles["Title"]))
        story.append(Paragraph(data.get("company_name") or "", styles["Heading2"]))
        story.append(Spacer(1, 10))

        info = [
            ["Personel", data.get("employee_name") or ""],
            ["Pozisyon", data.get("position") or "-"],
            ["Departman", data.get("department_name") or "-"],
            ["Dönem", data["month"]],
            ["Ödeme Tarihi", fmt_tr_date(data["payment_date"]) if data.get("payment_date") else "-"],
            ["Durum", data.get("status_label") or data.get("status") or ""],
        ]
        t_info = Table(info, colWidths=[120, 340])
        t_info.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (0, -1), font_bold),
            ("FONTNAME", (1, 0), (1, -1), font_reg),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]))
        story.append(t_info)
        story.append(Spacer(1, 14))

        amounts = [
            ["Kalem", "Tutar"],
            ["Brüt Maaş", fmt_currency(data["base_salary"])],
            ["Primler", fmt_currency(data["bonuses"])],
            ["Kesintiler", fmt_currency(-float(data["deductions"] or 0))],
            ["Net Ödenecek", fmt_currency(data["net_salary"])],
        ]
        t_amt = Table(amounts, colWidths=[300, 160], repeatRows=1)
        t_amt.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, 0), font_bold),
            ("FONTNAME", (0, 1), (-1, -2), font_reg),
            ("FONTNAME", (0, -1), (-1, -1), font_bold),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("ALIGN", (1, 1), (1, -1), "RIGHT"),
        ]))
        story.append(t_amt)
        doc.build(story)
