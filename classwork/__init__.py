"""classwork: object-oriented design demonstrations.

Two independent console programs: a vehicle-rental cost calculator built on
an abstract Vehicle hierarchy, and an exam-grading simulator built on an
abstract Exam hierarchy with its own grading exceptions.

Usage:
    python -m classwork fleet                  # Quote a Car, SUV or Truck rental
    python -m classwork vehicles               # List the fleet
    python -m classwork exam                   # Grade the demonstration exams
"""
