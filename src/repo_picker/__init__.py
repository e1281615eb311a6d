"""
Repo Picker

List a GitHub account's repositories, pick one from a numbered menu,
and clone it over SSH or fast-forward the existing local copy.
"""

__version__ = "0.1.0"
__author__ = "Repo Picker Team"
__description__ = "Interactive clone-or-update for GitHub repositories"
