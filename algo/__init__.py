"""Classic small algorithms: bases, arithmetic, lists, FizzBuzz, Big O examples, sorting and a GCD command."""

__version__ = "0.1.0"