"""
Core domain models, contracts and logging setup.

This module contains the foundational building blocks of the N(m.k)
number format validator that are independent of any caller.
"""

import logging

# Без configure_logging события библиотеки не выводятся
logging.getLogger("src").addHandler(logging.NullHandler())
