# ── Config ────────────────────────────────────────────────────────────────────
DEFAULT_DEMO = "inheritance"
BANNER_WIDTH = 60

# Sample data used by the demos
TEACHER_NAME = "aniket"
TEACHER_SUBJECT = "OOP"
TEACHER_SALARY = 100000

SHALLOW_STUDENT = ("aniket", 9.5)
DEEP_STUDENT = ("rahul", 9.5)
UPDATED_CGPA = 9.8

PERSON_STUDENT = ("aniket", 20, 123)  # name, age, roll no

STATIC_INSTANCES = 3
SHARED_VALUE = 42
