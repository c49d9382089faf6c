"""
Design pattern demos.

Components:
- behavioral.py: Observer (student grades -> teachers), Command (lecture control panel)
- creational.py: Factory Method (courses), Singleton (course catalog)
- structural.py: Adapter (payment processors), Facade (course enrollment)
- demo.py: runs all of the above on the console
"""
