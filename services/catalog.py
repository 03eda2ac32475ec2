"""Filtering and sorting for the storefront listing."""

SORT_OPTIONS = ('name', 'brand', 'price-asc', 'price-desc')


def brands(products, lang):
    return sorted({p.brand(lang) for p in products if p.brand(lang)}, key=str.casefold)


def filter_products(products, lang, brand=None, query=None):
    if brand:
        products = [p for p in products if p.brand(lang) == brand]
    if query:
        needle = query.strip().casefold()
        products = [
            p for p in products
            if needle in p.name(lang).casefold()
            or needle in p.brand(lang).casefold()
            or needle in p.code.casefold()
        ]
    return list(products)


def sort_products(products, lang, sort_by=None):
    if sort_by == 'name':
        return sorted(products, key=lambda p: p.name(lang).casefold())
    if sort_by == 'brand':
        return sorted(products, key=lambda p: p.brand(lang).casefold())
    if sort_by == 'price-asc':
        return sorted(products, key=lambda p: p.price)
    if sort_by == 'price-desc':
        return sorted(products, key=lambda p: p.price, reverse=True)
    return list(products)
