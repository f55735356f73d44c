"""Fixed Race to 21 rule constants."""

# Drawing to exactly this score wins the round on the spot
TARGET_SCORE = 21

FACE_CARD_VALUE = 10
ACE_VALUE = 1

STANDARD_DECK_SIZE = 52
