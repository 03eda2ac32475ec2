from app import create_app
from models import store
from models.product import Product
from models.settings import SiteSettings

SAMPLE_PRODUCTS = [
    {'code': '1001', 'name_en': 'Olive Oil 1L', 'name_ar': 'زيت زيتون ١ لتر', 'brand_en': 'Al Wadi',
     'brand_ar': 'الوادي', 'price': 32.5, 'description_en': 'Extra virgin olive oil',
     'description_ar': 'زيت زيتون بكر ممتاز'},
    {'code': '1002', 'name_en': 'Basmati Rice 5kg', 'name_ar': 'أرز بسمتي ٥ كجم', 'brand_en': 'Al Walimah',
     'brand_ar': 'الوليمة', 'price': 54.0, 'description_en': 'Long grain basmati rice',
     'description_ar': 'أرز بسمتي طويل الحبة'},
    {'code': '1003', 'name_en': 'Arabic Coffee 250g', 'name_ar': 'قهوة عربية ٢٥٠ جم', 'brand_en': 'Al Qahwa',
     'brand_ar': 'القهوة', 'price': 28.75, 'description_en': 'Light roast with cardamom',
     'description_ar': 'تحميص خفيف مع الهيل'},
]


def create_data():
    app = create_app()
    with app.app_context():
        # حذف البيانات القديمة
        products = [Product.from_payload(i, data) for i, data in enumerate(SAMPLE_PRODUCTS, start=1)]
        store.write_products(products)
        store.write_settings(SiteSettings())
        print("Sample data written to", app.config['PRODUCTS_FILE'])
        print("Admin login:", app.config['ADMIN_USERNAME'], "/", app.config['ADMIN_PASSWORD'])

if __name__ == '__main__':
    create_data()
