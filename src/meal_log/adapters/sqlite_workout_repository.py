"""SQLite repository for workouts."""

import sqlite3
from dataclasses import dataclass

from meal_log.domain.activities import Workout
from meal_log.services.workouts import WorkoutRepository


@dataclass
class SqliteWorkoutRepository(WorkoutRepository):
    """SQLite implementation for workout rows."""

    conn: sqlite3.Connection

    def insert_workout(self, workout: Workout) -> int:
        """Insert a workout and return its new id."""
        cursor = self.conn.execute(
            "INSERT INTO workouts(date, type, unit, qty, kcal) VALUES(?, ?, ?, ?, ?)",
            (
                workout.date,
                workout.activity,
                workout.unit,
                workout.quantity,
                workout.kcal,
            ),
        )
        self.conn.commit()
        return int(cursor.lastrowid)

    def list_workouts(self, date: str) -> list[Workout]:
        """Return workouts for a date in insertion order."""
        rows = self.conn.execute(
            "SELECT * FROM workouts WHERE date = ? ORDER BY id ASC", (date,)
        ).fetchall()
        return [
            Workout(
                id=row["id"],
                date=row["date"],
                activity=row["type"],
                unit=row["unit"],
                quantity=row["qty"],
                kcal=row["kcal"],
            )
            for row in rows
        ]
