"""A minimal integer complex number."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """Complex number with integer real and imaginary parts."""

    real: int = 0
    imag: int = 0

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __str__(self) -> str:
        return f"{self.real} + {self.imag}i"