"""Test double for Open ONI's ``manage.py load_titles`` command.

The double itself lives in :mod:`oni_double.manage`. The helpers an
agent-side test uses to stage ``marc.xml`` and run it live in
:mod:`oni_double.harness`, and ``session/`` is an ONI location whose
``manage.py`` runs the double.
"""

__all__: list[str] = []
