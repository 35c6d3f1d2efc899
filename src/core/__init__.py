"""
Core color identity engine: alphabet, validation, set algebra, enumeration.

Модуль не зависит от внешних систем: нет I/O, нет состояния процесса кроме
констант, вычисленных из алфавита при импорте.
"""
