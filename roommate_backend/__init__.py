"""
Roommate Backend — user store package.

Contains the User domain model and store contract, the SQLAlchemy-backed
implementation, application use cases, and the DI container that wires
them together (main.py holds the startup/shutdown lifespan).
"""
