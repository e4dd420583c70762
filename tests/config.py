"""Shared configuration values for the pyrefract test suite"""

SEED = 10
