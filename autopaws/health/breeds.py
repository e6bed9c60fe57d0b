# autopaws/health/breeds.py
"""
견종/나이별 케어 프로필과 하루 일정 생성기

견종 문자열에 포함된 키워드로 견종 계열을 고르고,
계열과 생애 단계(LifeStage)에 맞춰 고정된 일정 항목을 조합합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from autopaws.models.pet import LifeStage, PetProfile


@dataclass(frozen=True)
class BreedProfile:
    family: str
    characteristics: str
    health_risks: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    activity_needs: str = ""
    feeding: List[str] = field(default_factory=list)
    grooming: List[str] = field(default_factory=list)
    behavior: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'family': self.family,
            'characteristics': self.characteristics,
            'health_risks': list(self.health_risks),
            'recommendations': list(self.recommendations),
            'activity_needs': self.activity_needs,
            'feeding': list(self.feeding),
            'grooming': list(self.grooming),
            'behavior': list(self.behavior),
        }


@dataclass(frozen=True)
class ScheduleItem:
    type: str
    time: str
    description: str
    priority: str
    health_benefit: str
    breed_specific: bool = False
    weather_dependent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'time': self.time,
            'description': self.description,
            'priority': self.priority,
            'health_benefit': self.health_benefit,
            'breed_specific': self.breed_specific,
            'weather_dependent': self.weather_dependent,
        }


LABRADOR = BreedProfile(
    family="labrador",
    characteristics="Labradors are energetic, friendly, and highly trainable dogs known for their love of water and retrieving.",
    health_risks=["Hip dysplasia risk", "Obesity tendency", "Joint issues", "Ear infections due to floppy ears"],
    recommendations=["Regular joint monitoring", "Weight management", "Low-impact exercise"],
    activity_needs="High - requires 60-90 minutes of exercise daily",
    feeding=["2-3 meals per day to prevent bloat", "Monitor portion sizes to prevent obesity"],
    grooming=["Weekly brushing to manage shedding", "Regular ear cleaning"],
    behavior=["Highly social - needs interaction", "Prone to separation anxiety"],
)

GERMAN_SHEPHERD = BreedProfile(
    family="german shepherd",
    characteristics="German Shepherds are intelligent, loyal, and protective working dogs with high energy and strong work drive.",
    health_risks=["Hip dysplasia", "Bloat risk", "Degenerative myelopathy"],
    recommendations=["Hip screening", "Feeding management", "Neurological monitoring"],
    activity_needs="Very High - requires 90+ minutes of exercise and mental stimulation",
    feeding=["3-4 smaller meals to prevent bloat", "Consider joint supplements"],
    grooming=["Daily brushing during shedding seasons", "Regular dental care"],
    behavior=["Needs mental stimulation and training", "Protective instincts require socialization"],
)

BRACHYCEPHALIC = BreedProfile(
    family="bulldog",
    characteristics="Brachycephalic breeds with flat faces, known for their calm demeanor but requiring special health considerations.",
    health_risks=["Breathing issues", "Skin problems", "Heat sensitivity"],
    recommendations=["Temperature monitoring", "Skin care", "Exercise moderation"],
    activity_needs="Low to Moderate - short walks and gentle play",
    feeding=["Smaller, more frequent meals", "Avoid overfeeding due to low activity"],
    grooming=["Daily face and skin fold cleaning", "Regular eye cleaning"],
    behavior=["Generally calm and good-natured", "Good apartment dogs"],
)

GENERAL = BreedProfile(
    family="general",
    characteristics="Your pet is a wonderful companion with unique characteristics.",
    health_risks=["General breed monitoring recommended"],
    recommendations=["Regular health checkups", "Breed-specific research"],
    activity_needs="Moderate - regular exercise and play",
    feeding=["Consistent feeding schedule", "Monitor portion sizes"],
    grooming=["Regular brushing", "Nail trimming", "Dental hygiene"],
    behavior=["Consistent training and socialization"],
)

# (키워드들, 프로필) - 앞에서부터 먼저 일치하는 계열 사용
BREED_FAMILIES: Tuple[Tuple[Tuple[str, ...], BreedProfile], ...] = (
    (('labrador', 'retriever'), LABRADOR),
    (('german shepherd',), GERMAN_SHEPHERD),
    (('bulldog', 'pug'), BRACHYCEPHALIC),
)

AGE_NEEDS = {
    LifeStage.PUPPY: "Puppy stage - high energy, frequent meals, socialization critical",
    LifeStage.ADULT: "Adult stage - establish routine, maintain health, regular exercise",
    LifeStage.SENIOR: "Senior stage - monitor health closely, adjust activity, joint care important",
    LifeStage.UNKNOWN: "Age not recorded - add your pet's age for stage-specific advice",
}

PUPPY_MEALS = [
    ScheduleItem("Puppy Feeding", "07:00", "Morning puppy meal - high protein for growth", "high",
                 "Supports healthy growth and development", breed_specific=True),
    ScheduleItem("Puppy Feeding", "12:00", "Midday puppy meal - smaller portion", "high",
                 "Maintains steady energy and growth", breed_specific=True),
    ScheduleItem("Puppy Feeding", "17:00", "Evening puppy meal - main meal", "high",
                 "Supports overnight growth and recovery", breed_specific=True),
]

ADULT_MEALS = [
    ScheduleItem("Morning Feeding", "07:00", "Adult morning meal - balanced nutrition", "high",
                 "Provides energy for the day", breed_specific=True),
    ScheduleItem("Evening Feeding", "18:00", "Adult evening meal - complete nutrition", "high",
                 "Supports overnight recovery and health", breed_specific=True),
]

EXERCISE_BY_FAMILY = {
    "labrador": [
        ScheduleItem("High-Intensity Exercise", "08:00",
                     "Morning run or fetch session - Labradors need vigorous exercise", "high",
                     "Prevents obesity and maintains joint health", True, True),
        ScheduleItem("Swimming Session", "15:00", "Water activity - perfect for Labradors", "medium",
                     "Low-impact exercise, great for joints", True, True),
    ],
    "german shepherd": [
        ScheduleItem("Intensive Training", "08:00", "Mental stimulation and obedience training", "high",
                     "Prevents behavioral issues, satisfies work drive", True, False),
        ScheduleItem("Extended Exercise", "16:00", "Extended exercise session for high-energy breed", "high",
                     "Burns energy, maintains physical health", True, True),
    ],
    "bulldog": [
        ScheduleItem("Gentle Walk", "09:00", "Short, gentle walk - avoid overexertion", "medium",
                     "Maintains mobility without stressing breathing", True, True),
        ScheduleItem("Indoor Play", "14:00", "Cool indoor activity during hot weather", "medium",
                     "Mental stimulation without heat stress", True, True),
    ],
    "general": [
        ScheduleItem("Daily Exercise", "16:00", "Regular exercise session tailored to your pet", "medium",
                     "Maintains physical and mental health", True, True),
    ],
}

GROOMING_BY_FAMILY = {
    "labrador": ScheduleItem("Ear Cleaning", "20:00", "Weekly ear cleaning to prevent infections", "medium",
                             "Prevents ear infections common in floppy-eared breeds", True),
    "bulldog": ScheduleItem("Face Cleaning", "21:00", "Daily face and skin fold cleaning", "high",
                            "Prevents skin infections in facial folds", True),
}

SENIOR_JOINT_CARE = ScheduleItem("Joint Care Exercise", "19:00", "Gentle stretching and joint-friendly activities",
                                 "high", "Maintains mobility and reduces arthritis pain")

MENTAL_STIMULATION = ScheduleItem("Mental Stimulation", "10:00", "Puzzle toys, training, or interactive games",
                                  "medium", "Prevents boredom and behavioral issues")

HYDRATION_CHECK = ScheduleItem("Hydration Check", "14:00", "Ensure adequate water intake after exercise", "high",
                               "Prevents dehydration and heat stress", True, True)
HYDRATION_FAMILIES = ("labrador", "german shepherd")


def breed_profile(breed: str) -> BreedProfile:
    """
    견종 문자열로 견종 계열 프로필을 찾습니다.

    Args:
        breed: 자유 입력 견종명 (대소문자 무시, 부분 일치)

    Returns:
        일치하는 BreedProfile, 없으면 GENERAL
    """
    normalized = (breed or "").lower()
    for keywords, profile in BREED_FAMILIES:
        if any(keyword in normalized for keyword in keywords):
            return profile
    return GENERAL


def age_analysis(pet: PetProfile) -> Dict[str, Any]:
    stage = pet.life_stage
    return {
        'age_years': pet.age_years,
        'life_stage': stage.value,
        'needs': AGE_NEEDS[stage],
    }


def daily_schedule(pet: PetProfile) -> List[ScheduleItem]:
    """견종 계열과 생애 단계로 하루 케어 일정을 시간순으로 만듭니다."""
    family = breed_profile(pet.breed).family
    stage = pet.life_stage

    items = list(PUPPY_MEALS if stage is LifeStage.PUPPY else ADULT_MEALS)
    items.extend(EXERCISE_BY_FAMILY[family])
    if stage is LifeStage.SENIOR:
        items.append(SENIOR_JOINT_CARE)
    if family in GROOMING_BY_FAMILY:
        items.append(GROOMING_BY_FAMILY[family])
    items.append(MENTAL_STIMULATION)
    if family in HYDRATION_FAMILIES:
        items.append(HYDRATION_CHECK)

    # "HH:MM" 문자열은 사전순 정렬이 곧 시간순
    return sorted(items, key=lambda item: item.time)
