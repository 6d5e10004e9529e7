"""SOC Efficacy Calculator — composite SOC maturity scoring across five weighted domains."""

__version__ = "1.0.0"
