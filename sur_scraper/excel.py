# sur_scraper/excel.py
import pandas as pd
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

def save_styled_excel(df: pd.DataFrame, xlsx_path: str, sheet: str = "SUR") -> None:
    with pd.ExcelWriter(xlsx_path, engine="openpyxl") as xw:
        df.to_excel(xw, index=False, sheet_name=sheet)
        ws = xw.book[sheet]
        ws.freeze_panes = "A2"
        ws.auto_filter.ref = ws.dimensions
        ws.row_dimensions[1].height = 28
        for c in ws[1]:
            c.font = Font(bold=True)
            c.alignment = Alignment(vertical="top", wrap_text=True)
        for row in ws.iter_rows(min_row=2, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
            for c in row:
                c.alignment = Alignment(vertical="top", wrap_text=True)
        for i, col in enumerate(df.columns, start=1):
            series = df[col].astype(str).fillna("")
            est = len(col)
            if len(series):
                est = max(est, int(series.str.len().quantile(0.85)))
            ws.column_dimensions[get_column_letter(i)].width = max(12, min(est, 60))
