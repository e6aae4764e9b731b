# iwc/errors.py
"""Иерархия исключений пакета **IWC**.

* **MalformedConfigurationError** – некорректные входные данные кривой
  (меньше двух точек, повтор объёма, min > max, NaN).
* **InfeasibleConstraintError** – ограничения по объёму хранилища
  невыполнимы: ни один допустимый текущий объём не позволяет попасть в
  допустимый диапазон следующего периода.
"""

from __future__ import annotations


class IwcError(Exception):
    """Базовый класс всех ошибок пакета."""


class MalformedConfigurationError(IwcError, ValueError):
    """Inject/withdraw configuration cannot be used to build a constraint."""


class InfeasibleConstraintError(IwcError, RuntimeError):
    """Storage inventory constraints cannot be satisfied."""
