"""
The CONTROLLER layer applies user edits to the model.
Pure conversion rules live in `converter`; the Qt-facing store and the
input method watcher wrap them with signals.
"""
