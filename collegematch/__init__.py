"""College Match: explainable college recommendations."""
