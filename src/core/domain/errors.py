"""
Иерархия исключений числового формата N(m.k)

Ошибки возникают только при конфигурировании валидатора.
Проверка значений (is_valid_number) никогда не бросает исключений.
"""


class NumberFormatError(Exception):
    """Базовое исключение для ошибок числового формата."""


class ConfigurationError(NumberFormatError, ValueError):
    """
    Невалидная конфигурация формата N(m.k).

    Возникает, когда precision <= 0, scale < 0 или scale >= precision,
    а также при некорректной нотации или JSON-документе формата.
    Ошибка вызывающей стороны: повтор с той же конфигурацией бесполезен.
    """
