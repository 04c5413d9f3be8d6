"""
Basic usage example for Revision Tracker.

This example demonstrates:
1. Previewing the revision dates for a start date
2. Scheduling topics for a user
3. Listing the user's upcoming revisions
"""

import asyncio

from revision_tracker.core.agenda import schedule_topic, upcoming_items
from revision_tracker.core.dates import calculate_revision_dates, format_date
from revision_tracker.storage.memory_store import InMemoryStorage


async def main() -> None:
    # 1. Preview a schedule
    print("Revision dates for 2026-07-19:")
    for date in calculate_revision_dates("2026-07-19"):
        print(f"  - {format_date(date)}")

    # 2. Schedule topics for user 1
    storage = InMemoryStorage()
    await storage.initialize()

    topics = [
        ("Functions in JS", "2026-07-19"),
        ("Closures", "2026-08-02"),
        ("Month-end rollover", "2027-01-31"),
    ]

    print("\nScheduling topics...")
    for topic, start in topics:
        items = schedule_topic(topic, start)
        await storage.add_data("1", items)
        print(f"  - {topic}: {len(items)} revisions")

    # 3. Show what is coming up
    print("\nUpcoming revisions for user 1:")
    for item in upcoming_items(await storage.get_data("1")):
        print(f"  {format_date(item.date):<20} {item.topic}")

    await storage.close()


if __name__ == "__main__":
    asyncio.run(main())
