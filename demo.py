#!/usr/bin/env python
import os

from sdk.pystore import StoreClient, StoreAPIError


def main():
    c = StoreClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY"),
    )

    print(c.welcome())

    # -----------------------------
    # List and filter
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics, one per page, page 2...")
    print(c.list_products(category="electronics", page=2, limit=1))

    # -----------------------------
    # Create product
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("Kettle", "1.7L electric kettle", 35.5, "kitchen", True)
    print(kettle)

    # -----------------------------
    # Search and stats
    # -----------------------------
    print("\nSearching for 'kett'...")
    print(c.search_products("kett"))

    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Update, then delete
    # -----------------------------
    print("\nMarking the kettle out of stock...")
    print(c.update_product(kettle["id"], in_stock=False, price=29.99))

    print("\nDeleting the kettle...")
    c.delete_product(kettle["id"])
    try:
        c.get_product(kettle["id"])
    except StoreAPIError as e:
        print(f"Lookup after delete: {e}")


if __name__ == "__main__":
    main()
