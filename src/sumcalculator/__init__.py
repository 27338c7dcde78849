"""
Sum Calculator
==============
A small PySide6 desktop form that adds two numbers typed by the user.

Layers:
    model: Qt-free state snapshots, parsing and formatting.
    app:   the QApplication factory and the observable store.
    view:  the main window and the calculator panel.
"""
