import io

import pandas as pd

EXPORT_COLUMNS = ['code', 'name_en', 'name_ar', 'brand_en', 'brand_ar', 'price',
                  'description_en', 'description_ar', 'imageUrl']


def export_products(products):
    """Build an .xlsx workbook whose columns match the import format."""
    df = pd.DataFrame([p.to_dict() for p in products], columns=EXPORT_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='xlsxwriter') as writer:
        df.to_excel(writer, sheet_name='Products', index=False)

        worksheet = writer.sheets['Products']
        workbook = writer.book

        # تنسيق العناوين
        header_format = workbook.add_format({
            'bold': True,
            'valign': 'top',
            'fg_color': '#D7E4BC',
            'border': 1,
            'align': 'center'
        })
        for col_num, value in enumerate(df.columns.values):
            worksheet.write(0, col_num, value, header_format)

        # ضبط عرض الأعمدة
        for i, col in enumerate(df.columns):
            max_length = max(df[col].astype(str).map(len).max() if len(df) else 0, len(col))
            worksheet.set_column(i, i, min(max_length + 2, 60))

    output.seek(0)
    return output
