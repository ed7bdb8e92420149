import asyncio
from sdk.catalog_client import CatalogClient
import requests

async def create_in_thread(client, name, price):
    try:
        product = await asyncio.to_thread(client.create_product, name, price, "demo")
        print(f"✅ created {product['name']} with id {product['id']}")
        return product["id"]
    except requests.exceptions.HTTPError as e:
        print(f"❌ {name} failed with status {e.response.status_code}: {e.response.text}")
    except Exception as e:
        print(f"❌ {name} unexpected failure: {e}")
    return None

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:3001")
    before = {p["id"] for p in c.list_products()}

    print("\n⚡ Creating 10 products concurrently...")
    ids = await asyncio.gather(*(
        create_in_thread(c, f"Widget {i}", 1.0 + i) for i in range(10)
    ))
    ids = [i for i in ids if i is not None]

    print(f"\n🆔 New ids: {sorted(ids)}")
    print(f"   unique: {len(set(ids)) == len(ids)}, all above existing: {all(i > max(before, default=0) for i in ids)}")

    # Clean up
    for pid in ids:
        c.delete_product(pid)
    print(f"🧹 Deleted {len(ids)} demo products")

if __name__ == "__main__":
    asyncio.run(main())
