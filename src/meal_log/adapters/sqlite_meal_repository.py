"""SQLite repository for meals."""

import sqlite3
from dataclasses import dataclass

from meal_log.domain.meals import Meal
from meal_log.services.meals import MealRepository


@dataclass
class SqliteMealRepository(MealRepository):
    """SQLite implementation for meal rows."""

    conn: sqlite3.Connection

    def insert_meal(self, meal: Meal) -> int:
        """Insert a meal and return its new id."""
        cursor = self.conn.execute(
            """
            INSERT INTO meals(date, time, band, name, kcal, p, f, c, fiber, sodium)
            VALUES(?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                meal.date,
                meal.time,
                meal.band,
                meal.name,
                meal.kcal,
                meal.protein,
                meal.fat,
                meal.carbohydrate,
                meal.fiber,
                meal.sodium,
            ),
        )
        self.conn.commit()
        return int(cursor.lastrowid)

    def list_meals(self, date: str) -> list[Meal]:
        """Return meals for a date in insertion order."""
        rows = self.conn.execute(
            "SELECT * FROM meals WHERE date = ? ORDER BY id ASC", (date,)
        ).fetchall()
        return [_row_to_meal(row) for row in rows]

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal by id and report whether a row was removed."""
        cursor = self.conn.execute("DELETE FROM meals WHERE id = ?", (meal_id,))
        self.conn.commit()
        return cursor.rowcount > 0


def _row_to_meal(row: sqlite3.Row) -> Meal:
    return Meal(
        id=row["id"],
        date=row["date"],
        time=row["time"],
        band=row["band"],
        name=row["name"] or "",
        kcal=row["kcal"] or 0.0,
        protein=row["p"] or 0.0,
        fat=row["f"] or 0.0,
        carbohydrate=row["c"] or 0.0,
        fiber=row["fiber"] or 0.0,
        sodium=row["sodium"] or 0.0,
    )
