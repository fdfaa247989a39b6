# Small built-in question bank.
# Mirrors the collection used in the CSV export examples:
#   short answer: Addition, Letters
#   multiple choice: Colors, Shapes

QUESTIONS = [
    {
        "id": 1,
        "name": "Addition",
        "type": "short_answer_question",
        "body": "What is 2+2?",
        "expected": "4",
        "options": [],
        "points": 1,
        "published": True,
    },
    {
        "id": 2,
        "name": "Letters",
        "type": "short_answer_question",
        "body": "What is the last letter of the English alphabet?",
        "expected": "Z",
        "options": [],
        "points": 1,
        "published": False,
    },
    {
        "id": 5,
        "name": "Colors",
        "type": "multiple_choice_question",
        "body": "Which of these is a color?",
        "expected": "red",
        "options": ["red", "apple", "firetruck"],
        "points": 1,
        "published": True,
    },
    {
        "id": 9,
        "name": "Shapes",
        "type": "multiple_choice_question",
        "body": "What shape can you make with one line?",
        "expected": "circle",
        "options": ["square", "triangle", "circle"],
        "points": 2,
        "published": False,
    },
]
