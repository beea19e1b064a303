"""
Terminal front end for the product catalog.

Usage:
    catalog-cli list [--active | --category C | --search T] [--page N]
    catalog-cli show 3
    catalog-cli create --name "Desk Lamp" --price 24.50 --stock 12 --category Lighting
    catalog-cli update 3 --price 899.99
    catalog-cli delete 3
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from catalog.client.forms import ProductForm, format_price, paginate
from catalog.client.hooks import ProductOperations, ProductSearch, ProductsStore, ProductStore
from catalog.client.product_client import ProductApiError, ProductClient
from catalog.client.settings import ClientSettings

FORM_FIELDS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "stock": "stock_quantity",
    "category": "category",
    "image_url": "image_url",
    "sku": "sku",
}


def _render_row(p: Dict[str, Any], currency: str) -> str:
    status = "active" if p["isActive"] else "inactive"
    return (
        f"#{p['id']:<5} {p['name']:<40} {format_price(p['price'], currency):>16} "
        f"stock={p['stockQuantity']:<6} {p.get('category') or '-':<15} {status}"
    )


def _render_detail(p: Dict[str, Any], currency: str) -> str:
    lines = [
        f"#{p['id']} {p['name']}",
        f"  price:       {format_price(p['price'], currency)}",
        f"  stock:       {p['stockQuantity']}",
        f"  category:    {p.get('category') or '-'}",
        f"  sku:         {p.get('sku') or '-'}",
        f"  image:       {p.get('imageUrl') or '-'}",
        f"  active:      {'yes' if p['isActive'] else 'no'}",
        f"  created:     {p['createdAt']}",
        f"  updated:     {p['updatedAt']}",
    ]
    if p.get("description"):
        lines.insert(1, f"  {p['description']}")
    return "\n".join(lines)


def _print_form_errors(form: ProductForm, out) -> None:
    for key, msg in form.errors.items():
        print(f"  {key}: {msg}", file=out)


def _add_form_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name")
    parser.add_argument("--description")
    parser.add_argument("--price")
    parser.add_argument("--stock")
    parser.add_argument("--category")
    parser.add_argument("--image-url", dest="image_url")
    parser.add_argument("--sku")
    active = parser.add_mutually_exclusive_group()
    active.add_argument("--active", dest="is_active", action="store_true", default=None)
    active.add_argument("--inactive", dest="is_active", action="store_false")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-cli", description="Product catalog client.")
    parser.add_argument("--base-url", default=None, help="API base URL, e.g. http://localhost:5073/api")
    sub = parser.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="list products")
    which = ls.add_mutually_exclusive_group()
    which.add_argument("--active", action="store_true", help="only active products")
    which.add_argument("--category")
    which.add_argument("--search")
    ls.add_argument("--page", type=int, default=1)

    show = sub.add_parser("show", help="show one product")
    show.add_argument("id", type=int)

    create = sub.add_parser("create", help="create a product")
    _add_form_args(create)

    update = sub.add_parser("update", help="edit a product; unspecified fields keep their value")
    update.add_argument("id", type=int)
    _add_form_args(update)

    delete = sub.add_parser("delete", help="delete a product")
    delete.add_argument("id", type=int)
    return parser


def _fill_form(form: ProductForm, args) -> ProductForm:
    for arg_name, attr in FORM_FIELDS.items():
        value = getattr(args, arg_name)
        if value is not None:
            setattr(form, attr, value)
    if args.is_active is not None:
        form.is_active = args.is_active
    return form


def _cmd_list(client: ProductClient, settings: ClientSettings, args, out) -> int:
    if args.search is not None:
        search = ProductSearch(client)
        search.search_products(args.search)
        products: List[Dict[str, Any]] = search.search_results
        error = search.error
    elif args.category is not None or args.active:
        try:
            if args.active:
                products = client.get_active_products()
            else:
                products = client.get_products_by_category(args.category)
            error = None
        except ProductApiError as e:
            products, error = [], str(e)
    else:
        store = ProductsStore(client)
        products, error = store.products, store.error

    if error:
        print(f"Error: {error}", file=out)
        return 1
    if not products:
        print("No products found.", file=out)
        return 0
    page_items, total_pages = paginate(products, args.page, settings.ITEMS_PER_PAGE)
    for p in page_items:
        print(_render_row(p, settings.DEFAULT_CURRENCY), file=out)
    page = min(max(args.page, 1), total_pages)
    print(
        f"Showing {len(page_items)} of {len(products)} products (page {page}/{total_pages})",
        file=out,
    )
    return 0


def _cmd_show(client: ProductClient, settings: ClientSettings, args, out) -> int:
    store = ProductStore(client, args.id)
    if store.error:
        print(f"Error: {store.error}", file=out)
        return 1
    print(_render_detail(store.product, settings.DEFAULT_CURRENCY), file=out)
    return 0


def _cmd_create(client: ProductClient, settings: ClientSettings, args, out) -> int:
    form = _fill_form(ProductForm(), args)
    if not form.validate():
        print("Please fix the following fields:", file=out)
        _print_form_errors(form, out)
        return 2
    ops = ProductOperations(client)
    created = ops.create_product(form.to_payload())
    if created is None:
        print("Failed to create product. Please try again.", file=out)
        return 1
    print(f"Product created successfully! (#{created['id']})", file=out)
    return 0


def _cmd_update(client: ProductClient, settings: ClientSettings, args, out) -> int:
    store = ProductStore(client, args.id)
    if store.error:
        print(f"Error: {store.error}", file=out)
        return 1
    form = _fill_form(ProductForm.from_product(store.product), args)
    if not form.validate():
        print("Please fix the following fields:", file=out)
        _print_form_errors(form, out)
        return 2
    ops = ProductOperations(client)
    updated = ops.update_product(args.id, form.to_payload())
    if updated is None:
        print("Failed to update product. Please try again.", file=out)
        return 1
    print("Product updated successfully!", file=out)
    return 0


def _cmd_delete(client: ProductClient, settings: ClientSettings, args, out) -> int:
    ops = ProductOperations(client)
    if not ops.delete_product(args.id):
        print("Failed to delete product. Please try again.", file=out)
        return 1
    print("Product deleted successfully!", file=out)
    return 0


COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "create": _cmd_create,
    "update": _cmd_update,
    "delete": _cmd_delete,
}


def main(argv: Optional[List[str]] = None, client: Optional[ProductClient] = None, out=None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    settings = client.settings if client is not None else ClientSettings()
    if client is None:
        client = ProductClient(base_url=args.base_url, settings=settings)
    return COMMANDS[args.command](client, settings, args, out)


if __name__ == "__main__":
    sys.exit(main())
