import math
from dataclasses import dataclass

# الحقول النصية ثنائية اللغة
TEXT_FIELDS = ('code', 'name_en', 'name_ar', 'brand_en', 'brand_ar', 'description_en', 'description_ar')


def coerce_price(value, default=0.0):
    """Convert a price to float; blank, unparsable, non-finite or negative values give ``default``."""
    if value is None or value == '':
        return default
    try:
        price = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(price) or price < 0:
        return default
    return price


def _text(value):
    if value is None:
        return ''
    return str(value)


# نموذج المنتج
@dataclass
class Product:
    id: int
    code: str = ''
    name_en: str = ''
    name_ar: str = ''
    brand_en: str = ''
    brand_ar: str = ''
    price: float = 0.0
    description_en: str = ''
    description_ar: str = ''
    image_url: str = ''

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data['id']),
            price=coerce_price(data.get('price')),
            image_url=_text(data.get('imageUrl')),
            **{field: _text(data.get(field)) for field in TEXT_FIELDS}
        )

    @classmethod
    def from_payload(cls, product_id, payload):
        product = cls(id=product_id)
        product.update(payload)
        return product

    def update(self, payload):
        """Overwrite the fields present in ``payload`` and keep the rest."""
        for field in TEXT_FIELDS:
            if payload.get(field) is not None:
                setattr(self, field, _text(payload[field]))
        if payload.get('price') is not None:
            self.price = coerce_price(payload['price'], self.price)
        if payload.get('imageUrl') is not None:
            self.image_url = _text(payload['imageUrl'])
        return self

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'name_en': self.name_en,
            'name_ar': self.name_ar,
            'brand_en': self.brand_en,
            'brand_ar': self.brand_ar,
            'price': self.price,
            'description_en': self.description_en,
            'description_ar': self.description_ar,
            'imageUrl': self.image_url,
        }

    def name(self, lang):
        return self.name_ar if lang == 'ar' else self.name_en

    def brand(self, lang):
        return self.brand_ar if lang == 'ar' else self.brand_en

    def description(self, lang):
        return self.description_ar if lang == 'ar' else self.description_en
