from .schemas import Absent, CloudWord, Found, Lookup, WordRecord, WordSubmission
