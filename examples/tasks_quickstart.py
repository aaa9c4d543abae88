#!/usr/bin/env python3
"""List, add or complete tasks through the Data API.

Reads MONGO_API_URL, MONGO_API_KEY, DATABASE, COLLECTION and DATA_SOURCE
from the environment.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from pydantic import BaseModel

from mongo_data_api import DataAPIClient, DataAPIEnv


class Task(BaseModel):
    text: str
    status: str = "open"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Manage tasks via the MongoDB Data API")
    p.add_argument("command", choices=["list", "add", "complete", "stats"])
    p.add_argument("text", nargs="?", help="Task text for add/complete")
    p.add_argument("--limit", type=int, default=20)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with DataAPIClient(DataAPIEnv.from_env(), document_model=Task) as tasks:
        if args.command == "list":
            result = await tasks.find(sort={"status": 1}, limit=args.limit)
            for task in result.documents:
                print(f"[{task.status:>8}] {task.text}")
        elif args.command == "add":
            result = await tasks.insert_one(Task(text=args.text))
            print(f"Inserted {result.inserted_id}")
        elif args.command == "complete":
            result = await tasks.update_one({"text": args.text}, {"$set": {"status": "complete"}})
            print(f"Matched {result.matched_count}, modified {result.modified_count}")
        else:
            result = await tasks.aggregate(
                [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
            )
            for row in result.documents:
                print(f"{row['_id']:>10}: {row['count']}")


if __name__ == "__main__":
    asyncio.run(main())
