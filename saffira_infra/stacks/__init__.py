from .cognito_stack import CognitoStack
from .student_data_stack import StudentDataStack

__all__ = [
    "CognitoStack",
    "StudentDataStack",
]
