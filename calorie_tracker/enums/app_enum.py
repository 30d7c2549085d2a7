from enum import Enum

class TrainingFrequencyEnum(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"

class GenderEnum(str, Enum):
    male = "male"
    female = "female"

class DayStatusEnum(str, Enum):
    empty = "empty"
    low = "low"
    good = "good"
    over = "over"
