from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from models.student import Student, StudentCreate


class RWLock:
    """Multiple readers or a single writer.

    A waiting writer blocks readers that arrive after it, so a steady stream
    of reads cannot starve writes.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class StudentStore:
    """In-memory student records guarded by a reader/writer lock.

    Ids start at 1 and are never reused, even after a delete. Callers only
    ever see copies of the stored records.
    """

    def __init__(self) -> None:
        self._lock = RWLock()
        self._students: Dict[int, Student] = {}
        self._next_id = 1

    def add(self, student: StudentCreate) -> int:
        with self._lock.write_locked():
            student_id = self._next_id
            self._students[student_id] = Student(id=student_id, **student.model_dump())
            self._next_id += 1
            return student_id

    def get(self, student_id: int) -> Optional[Student]:
        with self._lock.read_locked():
            student = self._students.get(student_id)
            return student.model_copy() if student is not None else None

    def get_all(self) -> List[Student]:
        with self._lock.read_locked():
            return [student.model_copy() for student in self._students.values()]

    def update(self, student_id: int, student: StudentCreate) -> bool:
        with self._lock.write_locked():
            if student_id not in self._students:
                return False
            self._students[student_id] = Student(id=student_id, **student.model_dump())
            return True

    def delete(self, student_id: int) -> bool:
        with self._lock.write_locked():
            if student_id not in self._students:
                return False
            del self._students[student_id]
            return True

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._students)
