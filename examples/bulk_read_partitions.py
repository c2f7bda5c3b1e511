#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from docstore.bulkread import (
    BulkReadError,
    PartitionReader,
    ReadPolicy,
    ReadResultAggregator,
    RestStoredProcedureExecutor,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bulk read partitions via the bulk read stored procedure")
    p.add_argument("sproc_link", help="e.g. dbs/mydb/colls/mycoll/sprocs/bulkRead")
    p.add_argument("partitions", nargs="+", help="partition key range ids")
    p.add_argument("--partition-key", default="/pk")
    p.add_argument("--group-by", default=None)
    p.add_argument("--page-size", type=int, default=5000)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    policy = ReadPolicy(page_size_hint=args.page_size)
    aggregator = ReadResultAggregator()

    async with RestStoredProcedureExecutor(
        os.environ["DOCSTORE_ENDPOINT"], os.environ["DOCSTORE_MASTER_KEY"]
    ) as executor:
        readers = [
            PartitionReader(pki, executor, args.sproc_link, args.partition_key, args.group_by, policy=policy)
            for pki in args.partitions
        ]
        outcomes = await asyncio.gather(*(r.read_all() for r in readers), return_exceptions=True)

    for reader, outcome in zip(readers, outcomes):
        if isinstance(outcome, BulkReadError):
            aggregator.add_failure(outcome)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            aggregator.add_result(outcome)
            print(f"pki {reader.partition_key_range_id:>4}: {outcome.number_of_documents_read} docs")

    result = aggregator.build()
    print("=" * 50)
    print(f"Documents read : {result.number_of_documents_read}")
    print(f"Request units  : {result.total_request_units_consumed:.2f}")
    print(f"Time taken     : {result.total_time_taken.total_seconds():.2f}s")
    print(f"Failures       : {len(result.failures)}")
    if not result.succeeded:
        for error in result.failures:
            print(f"  - {error}")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
