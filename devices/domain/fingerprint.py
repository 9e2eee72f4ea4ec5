"""
Device fingerprint domain logic.

A fingerprint is a convenience identifier, not a cryptographic one: it is a
32-bit rolling hash of environment signals. Two devices that report the same
signals (or whose signals collide in the hash) get the same identifier and
are treated as the same device by the activation policy.
"""

from dataclasses import dataclass

DEVICE_ID_PREFIX = "device_"


@dataclass(frozen=True)
class EnvironmentSignals:
    """Environment attributes a device identifier is derived from."""

    user_agent: str
    language: str
    hardware_concurrency: int
    screen_width: int = 0
    screen_height: int = 0
    color_depth: int = 0
    timezone: str = ""

    def fingerprint_source(self) -> str:
        """
        Concatenate the signals into the string that gets hashed.

        Screen geometry contributes the sum of its parts, not the
        individual values.
        """
        screen = self.screen_width + self.screen_height + self.color_depth
        return (
            f"{self.user_agent}{self.language}{self.hardware_concurrency}"
            f"{screen}{self.timezone}"
        )


def rolling_hash(text: str) -> int:
    """
    Compute a signed 32-bit rolling hash (h = h * 31 + c) over UTF-16 code units.

    Args:
        text: Input string

    Returns:
        Hash value in the range [-2**31, 2**31)
    """
    value = 0
    data = text.encode("utf-16-le")
    for index in range(0, len(data), 2):
        code_unit = data[index] | (data[index + 1] << 8)
        value = ((value << 5) - value + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def compute_device_fingerprint(signals: EnvironmentSignals) -> str:
    """
    Derive the device identifier for a set of environment signals.

    Args:
        signals: Environment signals of the device

    Returns:
        Identifier of the form ``device_<hex>``
    """
    return DEVICE_ID_PREFIX + format(abs(rolling_hash(signals.fingerprint_source())), "x")
