'''
Student Dashboard backend: academic calendar, daily schedule resolution
and semester progress, served over FastAPI (see main.py).
'''
