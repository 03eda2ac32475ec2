import math

from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired, FileAllowed
from wtforms import StringField, TextAreaField, FloatField, SubmitField
from wtforms.validators import DataRequired, NumberRange, Optional, ValidationError

class ProductForm(FlaskForm):
    code = StringField('Code', validators=[DataRequired()])
    name_en = StringField('Name (English)', validators=[Optional()])
    name_ar = StringField('Name (Arabic)', validators=[Optional()])
    brand_en = StringField('Brand (English)', validators=[Optional()])
    brand_ar = StringField('Brand (Arabic)', validators=[Optional()])
    price = FloatField('Price', default=0, validators=[Optional(), NumberRange(min=0)])
    description_en = TextAreaField('Description (English)', validators=[Optional()])
    description_ar = TextAreaField('Description (Arabic)', validators=[Optional()])
    image_url = StringField('Image URL', validators=[Optional()])
    submit = SubmitField('Save')

    def validate_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError('Price must be a finite number')

    def to_payload(self):
        return {
            'code': self.code.data,
            'name_en': self.name_en.data or '',
            'name_ar': self.name_ar.data or '',
            'brand_en': self.brand_en.data or '',
            'brand_ar': self.brand_ar.data or '',
            'price': self.price.data or 0,
            'description_en': self.description_en.data or '',
            'description_ar': self.description_ar.data or '',
            'imageUrl': self.image_url.data or '',
        }

class ImportForm(FlaskForm):
    file = FileField('Excel file', validators=[FileRequired(), FileAllowed(['xlsx', 'xls', 'csv'])])
    folder_id = StringField('Google Drive folder ID', validators=[Optional()])
    submit = SubmitField('Import')

class LogoForm(FlaskForm):
    logo = FileField('Logo', validators=[FileRequired()])
    submit = SubmitField('Upload Logo')
