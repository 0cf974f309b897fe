"""
Errors — типизированные ошибки кодека

Все ошибки терминальны: вызывающий код получает либо корректный результат,
либо исключение одного из типов ниже. Частичные результаты не возвращаются.

Иерархия:
    NumberCodecError(ValueError)
    ├── InvalidNumberFormat    — строка не является числом
    ├── InvalidNumberPhrase    — фраза не является числительным
    ├── InvalidLatinPowerName  — имя "-illion" не соответствует грамматике
    └── ArithmeticOverflow     — внутреннее переполнение при перебазировании exponent

ArithmeticOverflow внутренняя: encoder перехватывает её и переходит
на экспоненциальную фразу, normalizer поднимает её до InvalidNumberFormat.
"""


class NumberCodecError(ValueError):
    """Базовая ошибка кодека числительных."""

    pass


class InvalidNumberFormat(NumberCodecError):
    """Строка не представляет десятичное или экспоненциальное число."""

    pass


class InvalidNumberPhrase(NumberCodecError):
    """Фраза не является грамматически корректным английским числительным."""

    pass


class InvalidLatinPowerName(NumberCodecError):
    """Имя порядка ("-illion") не соответствует закрытой грамматике."""

    pass


class ArithmeticOverflow(NumberCodecError):
    """
    Переполнение при перебазировании exponent или развёртывании в plain форму.

    Не должна пересекать публичную границу пакета.
    """

    pass
