from .app_enum import TrainingFrequencyEnum, GenderEnum, DayStatusEnum
