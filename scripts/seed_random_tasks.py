import argparse
import sys
import traceback

from taskseed.core.config import get_seed_settings
from taskseed.core.db import get_conn
from taskseed.core.seeding import plan_summary, seed_tasks
from taskseed.core.store import count_tasks


def parse_args(argv=None):
    defaults = get_seed_settings()

    p = argparse.ArgumentParser(description="Replace all rows of the tasks table with random synthetic tasks")
    p.add_argument("--table", default=defaults.table, help=f"target table (default {defaults.table})")
    p.add_argument("--batches", type=int, default=defaults.batches, help="number of insert batches")
    p.add_argument("--batch-size", type=int, default=defaults.batch_size, help="tasks per batch")
    p.add_argument("--kinds", type=int, default=defaults.kinds, help="size of the random kind pool")
    p.add_argument("--queues", type=int, default=defaults.queues, help="size of the random queue pool")
    p.add_argument("--seed", type=int, default=defaults.seed, help="random seed (repeatable data)")
    p.add_argument("--with-ids", action="store_true",
                   help="insert generated ids too (otherwise the server default is used)")
    p.add_argument("--yes", action="store_true", help="actually delete + insert (otherwise dry-run)")
    args = p.parse_args(argv)

    defaults.table = args.table
    defaults.batches = args.batches
    defaults.batch_size = args.batch_size
    defaults.kinds = args.kinds
    defaults.queues = args.queues
    defaults.seed = args.seed
    defaults.include_ids = args.with_ids
    return defaults, args.yes


def main(argv=None) -> int:
    try:
        settings, confirmed = parse_args(argv)
        print(f"[seed_random_tasks] {plan_summary(settings)}")

        with get_conn() as conn:
            if not confirmed:
                cnt = count_tasks(conn, settings.table)
                print(f"[seed_random_tasks] would delete {cnt} rows from {settings.table}")
                print("[seed_random_tasks] dry-run only. Add --yes to apply.")
                return 0

            result = seed_tasks(conn, settings, log=lambda msg: print(f"[seed_random_tasks] {msg}"))
    except Exception as e:
        print(f"[seed_random_tasks] Failed to run script: {e}")
        traceback.print_exc()
        return 1

    print(
        f"[seed_random_tasks] done: deleted={result.deleted} "
        f"inserted={result.inserted} batches={result.batches}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
