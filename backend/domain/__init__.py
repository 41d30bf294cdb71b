"""Domain layer per il piano salute.

Questo package implementa la logica di business del motore (screening,
calcolo energetico, menu e allenamento), disaccoppiata dalla
presentazione e dall'infrastruttura.
"""
