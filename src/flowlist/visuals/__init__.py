"""
Ambient visuals.

Components:
- palettes.py: gradient definitions shared by the surfaces
- gradient_cycler.py: timer-driven palette index rotator
- celebration.py: one-shot falling-particle burst on task completion
"""
