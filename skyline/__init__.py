"""Build 3D printable STL models and text previews of GitHub contribution history."""

__version__ = "0.1.0"