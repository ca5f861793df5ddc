from typing import Optional

from faker import Faker

from .generator import InvalidArgument

LABEL_MIN_LEN = 5
LABEL_MAX_LEN = 50


def build_label_pool(count: int = 100, fake: Optional[Faker] = None) -> list[str]:
    """Random alphabetic labels (5..50 chars) used as kind/queue names. Duplicates are allowed."""
    if count < 0:
        raise InvalidArgument(f"count must be >= 0, got: {count}")

    if fake is None:
        fake = Faker()
    result = []
    for _ in range(count):
        length = fake.random.randint(LABEL_MIN_LEN, LABEL_MAX_LEN)
        result.append("".join(fake.random_letters(length=length)))
    return result
