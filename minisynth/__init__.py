"""A small monophonic synthesizer: oscillators, an ADSR envelope, note helpers and sample rendering."""

__version__ = "0.1.0"

__all__ = ["commands", "envelope", "notes", "oscillator", "rates", "render", "synthesizer"]