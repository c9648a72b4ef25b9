'''
Clock dependency. The schedule engine never reads the wall clock itself;
the API layer injects "today" through this dependency so tests can pin it.
'''
from datetime import date

def get_today() -> date:
    return date.today()
