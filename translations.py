from flask_babel import get_locale

# نصوص الواجهة باللغتين
MESSAGES = {
    'catalog_title': {'en': 'Product Catalog', 'ar': 'كتالوج المنتجات'},
    'admin_title': {'en': 'Admin Panel', 'ar': 'لوحة التحكم'},
    'all_brands': {'en': 'All Brands', 'ar': 'جميع العلامات التجارية'},
    'search_placeholder': {'en': 'Search...', 'ar': 'بحث...'},
    'sort_by': {'en': 'Sort by', 'ar': 'ترتيب حسب'},
    'sort_default': {'en': 'Default', 'ar': 'افتراضي'},
    'sort_name': {'en': 'Name', 'ar': 'الاسم'},
    'sort_brand': {'en': 'Brand', 'ar': 'العلامة التجارية'},
    'sort_price_asc': {'en': 'Price: Low to High', 'ar': 'السعر: من الأقل للأعلى'},
    'sort_price_desc': {'en': 'Price: High to Low', 'ar': 'السعر: من الأعلى للأقل'},
    'filter': {'en': 'Filter', 'ar': 'تصفية'},
    'no_products': {'en': 'No products found', 'ar': 'لم يتم العثور على منتجات'},
    'currency': {'en': 'SAR', 'ar': 'ر.س'},
    'code': {'en': 'Code', 'ar': 'الكود'},
    'name_en': {'en': 'Name (English)', 'ar': 'الاسم (إنجليزي)'},
    'name_ar': {'en': 'Name (Arabic)', 'ar': 'الاسم (عربي)'},
    'brand_en': {'en': 'Brand (English)', 'ar': 'العلامة التجارية (إنجليزي)'},
    'brand_ar': {'en': 'Brand (Arabic)', 'ar': 'العلامة التجارية (عربي)'},
    'brand': {'en': 'Brand', 'ar': 'العلامة التجارية'},
    'price': {'en': 'Price', 'ar': 'السعر'},
    'description_en': {'en': 'Description (English)', 'ar': 'الوصف (إنجليزي)'},
    'description_ar': {'en': 'Description (Arabic)', 'ar': 'الوصف (عربي)'},
    'image_url': {'en': 'Image URL', 'ar': 'رابط الصورة'},
    'image': {'en': 'Image', 'ar': 'الصورة'},
    'actions': {'en': 'Actions', 'ar': 'الإجراءات'},
    'products': {'en': 'Products', 'ar': 'المنتجات'},
    'add_product': {'en': 'Add Product', 'ar': 'إضافة منتج'},
    'edit_product': {'en': 'Edit Product', 'ar': 'تعديل المنتج'},
    'save': {'en': 'Save', 'ar': 'حفظ'},
    'edit': {'en': 'Edit', 'ar': 'تعديل'},
    'delete': {'en': 'Delete', 'ar': 'حذف'},
    'cancel': {'en': 'Cancel', 'ar': 'إلغاء'},
    'confirm_delete': {'en': 'Are you sure you want to delete this product?', 'ar': 'هل أنت متأكد من حذف هذا المنتج؟'},
    'import_excel': {'en': 'Import from Excel', 'ar': 'استيراد من Excel'},
    'excel_file': {'en': 'Excel file (.xlsx, .xls, .csv)', 'ar': 'ملف Excel (.xlsx, .xls, .csv)'},
    'folder_id': {'en': 'Google Drive folder ID (optional)', 'ar': 'معرف مجلد Google Drive (اختياري)'},
    'import': {'en': 'Import', 'ar': 'استيراد'},
    'export_excel': {'en': 'Export to Excel', 'ar': 'تصدير إلى Excel'},
    'logo': {'en': 'Company Logo', 'ar': 'شعار الشركة'},
    'upload_logo': {'en': 'Upload Logo', 'ar': 'تحميل الشعار'},
    'no_logo': {'en': 'No logo uploaded', 'ar': 'لم يتم تحميل شعار'},
    'username': {'en': 'Username', 'ar': 'اسم المستخدم'},
    'password': {'en': 'Password', 'ar': 'كلمة المرور'},
    'login': {'en': 'Login', 'ar': 'تسجيل الدخول'},
    'logout': {'en': 'Logout', 'ar': 'تسجيل الخروج'},
    'welcome': {'en': 'Welcome, {}', 'ar': 'مرحباً، {}'},
    'view_catalog': {'en': 'View Catalog', 'ar': 'عرض الكتالوج'},
    'login_success': {'en': 'Login successful', 'ar': 'تم تسجيل الدخول بنجاح'},
    'login_failed': {'en': 'Invalid username or password', 'ar': 'اسم المستخدم أو كلمة المرور غير صحيحة'},
    'logout_success': {'en': 'Logout successful', 'ar': 'تم تسجيل الخروج بنجاح'},
    'login_required': {'en': 'Please log in to access this page', 'ar': 'يرجى تسجيل الدخول للوصول إلى هذه الصفحة'},
    'product_added': {'en': 'Product added successfully', 'ar': 'تمت إضافة المنتج بنجاح'},
    'product_updated': {'en': 'Product updated successfully', 'ar': 'تم تعديل المنتج بنجاح'},
    'product_deleted': {'en': 'Product deleted successfully', 'ar': 'تم حذف المنتج بنجاح'},
    'product_not_found': {'en': 'Product not found', 'ar': 'المنتج غير موجود'},
    'save_failed': {'en': 'Failed to save product', 'ar': 'فشل حفظ المنتج'},
    'logo_uploaded': {'en': 'Logo uploaded successfully', 'ar': 'تم تحميل الشعار بنجاح'},
    'upload_failed': {'en': 'Upload failed', 'ar': 'فشل التحميل'},
    'import_done': {'en': 'Import completed: {} products imported, {} skipped',
                    'ar': 'اكتمل الاستيراد: تم استيراد {} منتج وتخطي {}'},
    'import_failed': {'en': 'Import failed', 'ar': 'فشل الاستيراد'},
}


def current_language():
    locale = get_locale()
    return locale.language if locale is not None else 'en'


def translate(key, *args, lang=None):
    lang = lang or current_language()
    entry = MESSAGES.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry['en']
    return text.format(*args) if args else text
