"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt).
It deals with the converter state and its error types.
"""
