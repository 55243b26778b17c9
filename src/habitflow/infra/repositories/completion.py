"""SQLModel implementation of the completion log."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Session, select

from ...models.habit import Completion


class SQLModelCompletionLog:
    """Completion records bound to an open session.

    The log never commits; the owning store decides the transaction boundary.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, habit_id: Optional[int] = None, day: Optional[date] = None) -> list[Completion]:
        statement = select(Completion)
        if habit_id is not None:
            statement = statement.where(Completion.habit_id == habit_id)
        if day is not None:
            statement = statement.where(Completion.occurred_on == day)
        statement = statement.order_by(Completion.id)  # type: ignore[arg-type]
        return list(self.session.exec(statement).all())

    def find(self, habit_id: int, day: date) -> Optional[Completion]:
        statement = (
            select(Completion)
            .where(Completion.habit_id == habit_id)
            .where(Completion.occurred_on == day)
        )
        return self.session.exec(statement).first()

    def toggle(self, habit_id: int, day: date) -> Completion:
        completion = self.find(habit_id, day)
        if completion is None:
            completion = Completion(habit_id=habit_id, occurred_on=day, completed=True)
        else:
            completion.completed = not completion.completed
        self.session.add(completion)
        self.session.flush()
        return completion

    def delete_by_habit(self, habit_id: int) -> int:
        rows = self.get(habit_id=habit_id)
        for row in rows:
            self.session.delete(row)
        self.session.flush()
        return len(rows)


__all__ = ["SQLModelCompletionLog"]
