#!/usr/bin/env python
from sdk.catalog_client import CatalogClient, filter_products

def main():
    c = CatalogClient(base_url="http://127.0.0.1:3001")

    # -----------------------------
    # List products
    # -----------------------------
    print("Listing products...")
    products = c.list_products()
    print(products)

    # -----------------------------
    # Filter like the list page does
    # -----------------------------
    print("\nElectronics only...")
    print(filter_products(products, category="electronics"))

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating a product...")
    pen = c.create_product("Pen", 1.5, "office", "Blue ink ballpoint")
    print(pen)

    # -----------------------------
    # Update it
    # -----------------------------
    print("\nUpdating the product...")
    print(c.update_product(pen["id"], "Pen Pro", 2.0, "office", "Refillable"))
    print(c.get_product(pen["id"]))

    # -----------------------------
    # Delete it
    # -----------------------------
    print("\nDeleting the product...")
    c.delete_product(pen["id"])
    print("After delete:", c.get_product(pen["id"]))

if __name__ == "__main__":
    main()
