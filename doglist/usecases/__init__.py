"""Use-case layer for orchestrating screen workflows.

Each module coordinates the dog registry through ``DogRegistryPort`` and
translates domain errors into ``UseCaseError``, preserving MVVM + Hexagonal
boundaries.
"""
