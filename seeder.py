from typing import List, Optional

from faker import Faker

from models.student import StudentCreate
from store import StudentStore
from log import logger

SEED_COUNT = 10
MIN_AGE = 18
MAX_AGE = 27

FIRST_NAMES = [
    "John", "Jane", "Michael", "Emily", "David",
    "Sarah", "Robert", "Emma", "William", "Olivia",
]

LAST_NAMES = [
    "Smith", "Johnson", "Brown", "Taylor", "Miller",
    "Anderson", "Wilson", "Moore", "Jackson", "Martin",
]


def generate_random_student(fake: Faker) -> StudentCreate:
    first_name = fake.random_element(FIRST_NAMES)
    last_name = fake.random_element(LAST_NAMES)
    return StudentCreate(
        name=f"{first_name} {last_name}",
        age=fake.random_int(min=MIN_AGE, max=MAX_AGE),
        email=f"{first_name}.{last_name}@example.com",
    )


def seed_data(store: StudentStore, count: int = SEED_COUNT, fake: Optional[Faker] = None) -> List[int]:
    """
    Add ``count`` randomly generated students to ``store``.
    Pass a seeded Faker (``fake.seed_instance(n)``) for repeatable data.
    Returns the assigned ids in insertion order.
    """
    fake = fake or Faker()

    ids = []
    for _ in range(count):
        student = generate_random_student(fake)
        student_id = store.add(student)
        logger.info("Added student: %s (ID: %d)", student.name, student_id)
        ids.append(student_id)

    logger.info("Seeding completed successfully!")
    return ids
