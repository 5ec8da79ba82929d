"""
Kitchen Rush Simulation Script

Simulates kitchen staff advancing every order on the board concurrently,
one column at a time, against a running server.
Run from project root: python scripts/simulate.py

Version: 1.0.0
"""

import asyncio
import sys
import time
import argparse
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:8001"


async def fetch_board(client: httpx.AsyncClient) -> dict[str, Any]:
    """Fetch the current board projection."""
    response = await client.get(f"{API_BASE_URL}/api/board", timeout=30.0)
    response.raise_for_status()
    return response.json()


async def advance(
    client: httpx.AsyncClient,
    order_id: str,
    column: str,
) -> dict[str, Any]:
    """Move one order out of ``column``."""
    start_time = time.time()

    try:
        response = await client.post(
            f"{API_BASE_URL}/api/board/orders/{order_id}/advance",
            json={"column": column},
            timeout=30.0,
        )
        elapsed = round(time.time() - start_time, 3)

        if response.status_code == 200:
            data = response.json()
            return {
                "order_id": order_id,
                "success": True,
                "moved": data.get("moved"),
                "new_status": data.get("new_status"),
                "time": elapsed,
            }
        return {
            "order_id": order_id,
            "success": False,
            "error": response.text[:100],
            "time": elapsed,
        }
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "order_id": order_id,
            "success": False,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def run_rush(rounds: int) -> list[dict[str, Any]]:
    """
    Advance every order on the board once per round, all in parallel.

    Orders in the last column stay put; each round re-reads the board.
    """
    results: list[dict[str, Any]] = []

    async with httpx.AsyncClient() as client:
        for round_num in range(1, rounds + 1):
            board = await fetch_board(client)
            tasks = [
                advance(client, order["id"], column["title"])
                for column in board["columns"]
                for order in column["orders"]
            ]
            if not tasks:
                print(f"   Round {round_num}: board is empty")
                break

            round_results = await asyncio.gather(*tasks)
            moved = len([r for r in round_results if r.get("moved")])
            print(f"   Round {round_num}: {moved}/{len(round_results)} orders moved")
            results.extend(round_results)

        final = await fetch_board(client)

    print("\n📋 FINAL BOARD")
    for column in final["columns"]:
        numbers = ", ".join(o["order_number"] for o in column["orders"]) or "<empty>"
        print(f"   {column['title']:<15} {numbers}")

    return results


def print_summary(results: list[dict[str, Any]], total_time: float) -> None:
    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"   Requests: {len(results)}")
    print(f"   Successful: {len(successful)}")
    print(f"   Failed: {len(failed)}")
    print(f"   Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"   Average Response: {avg_time}s")

    if failed:
        print("\n⚠️  Failed Requests (showing first 5):")
        for f in failed[:5]:
            print(f"   Order {f['order_id']}: {f.get('error', 'Unknown error')}")
    print("=" * 70)


async def main(rounds: int) -> int:
    print("=" * 70)
    print("🍳 KITCHEN RUSH SIMULATION")
    print("=" * 70)

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{API_BASE_URL}/health")
        except httpx.HTTPError as e:
            print(f"❌ Server not reachable at {API_BASE_URL}: {e}")
            return 1
        print(f"✅ Health: {response.json().get('status')}")

    start = time.time()
    results = await run_rush(rounds)
    print_summary(results, round(time.time() - start, 3))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Kitchen Rush Simulation")
    parser.add_argument("--rounds", type=int, default=3, help="Number of advance rounds")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    args = parser.parse_args()

    API_BASE_URL = args.url
    sys.exit(asyncio.run(main(args.rounds)))
