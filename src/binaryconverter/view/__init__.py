"""The VIEW layer: Qt widgets only, no conversion logic."""
