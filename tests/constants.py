from datetime import date

TEST_STUDENT_ID = 'e46d56d4-a856-49cc-b078-bffa79d9a142'
TEST_OTHER_STUDENT_ID = '0f3d2b8e-5b8c-4a7e-9d3c-1c2f6a9e7b41'
TEST_ADMIN_ID = 'a1f0c3d2-7e4b-4c59-8a61-2b9d0e5f7c18'

# A Wednesday in the Monsoon semester of the preloaded 2025-26 calendar
TEST_TODAY = date(2025, 9, 10)

# Known dates of the preloaded calendar
DIWALI = date(2025, 10, 20)                      # Holiday, a Monday
SATURDAY_WORKING = date(2025, 9, 13)             # follows Wednesday's timetable
MID_SEM_EXAM_DAY = date(2025, 9, 23)
MONSOON_START = date(2025, 7, 28)
MONSOON_END = date(2025, 12, 3)
