"""
Fire concurrent /cart/add requests at one item of a running server and check
that the cart never takes more units than the item had in stock.

Usage:
    python tools/concurrency_cart.py --workers 16 --qty 3
    python tools/concurrency_cart.py --product <id> --workers 32 --qty 1
"""
import os

import requests
import concurrent.futures
import argparse

BASE = os.environ.get("TEESHOP_BASE", "http://127.0.0.1:3000")

def pick_product():
    r = requests.get(f"{BASE}/product/list", params={"limit": 100}, timeout=10)
    r.raise_for_status()
    stocked = [p for p in r.json()["items"] if p["stock"] > 0]
    if not stocked:
        raise SystemExit("No product with stock on the first page")
    return stocked[0]

def get_stock(product_id):
    r = requests.get(f"{BASE}/product/{product_id}", timeout=10)
    r.raise_for_status()
    return r.json()["stock"]

def add_task(i, product_id, qty):
    payload = {"productId": product_id, "quantity": qty}
    try:
        r = requests.post(f"{BASE}/cart/add", json=payload, timeout=20)
        return (i, r.status_code, r.text)
    except requests.RequestException as e:
        return (i, "ERR", str(e))

def run_add_concurrent(workers, product_id, qty):
    start_stock = get_stock(product_id)
    print(f"Running add test: workers={workers}, product={product_id}, qty={qty}, stock={start_stock}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(add_task, i, product_id, qty) for i in range(workers)]
        results = [f.result() for f in futures]
    accepted = [r for r in results if r[1] == 200]
    rejected = [r for r in results if r[1] != 200]
    end_stock = get_stock(product_id)
    print(f"Accepted: {len(accepted)} ({len(accepted) * qty} units), rejected: {len(rejected)}")
    for r in rejected[:5]:
        print("  ", r)
    print(f"Stock: {start_stock} -> {end_stock}")
    expected = start_stock - len(accepted) * qty
    if end_stock != expected or end_stock < 0:
        print(f"INCONSISTENT: expected stock {expected}")
        return 1
    print("OK: stock matches accepted reservations")
    return 0

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrent cart add test against a running server.")
    parser.add_argument("--product", default=None, help="product id (default: first stocked product)")
    parser.add_argument("--qty", type=int, default=1)
    parser.add_argument("--workers", type=int, default=8)
    args = parser.parse_args()

    product_id = args.product or pick_product()["id"]
    raise SystemExit(run_add_concurrent(args.workers, product_id, args.qty))
