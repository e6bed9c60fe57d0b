# autopaws/models/pet.py
from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum

from marshmallow import ValidationError

# 나이 구간 경계 (설정 불가 고정값)
PUPPY_MAX_AGE_YEARS = 1
ADULT_MAX_AGE_YEARS = 7

class LifeStage(Enum):
    PUPPY = "Puppy"
    ADULT = "Adult"
    SENIOR = "Senior"
    UNKNOWN = "Unknown"

@dataclass(frozen=True)
class PetProfile:
    """
    분석 대상 반려동물의 프로필.
    Firestore 'pets' 컬렉션 문서 중 건강 분석에 필요한 필드만 담습니다.
    weight는 설명용으로만 사용되며 점수 계산에는 쓰이지 않습니다.
    """
    breed: str = ""
    age_years: Optional[float] = None
    weight: Optional[str] = None
    name: Optional[str] = None
    pet_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'age_years', parse_age_years(self.age_years))
        object.__setattr__(self, 'breed', (self.breed or "").strip())

    @property
    def life_stage(self) -> LifeStage:
        if self.age_years is None:
            return LifeStage.UNKNOWN
        if self.age_years <= PUPPY_MAX_AGE_YEARS:
            return LifeStage.PUPPY
        if self.age_years <= ADULT_MAX_AGE_YEARS:
            return LifeStage.ADULT
        return LifeStage.SENIOR

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PetProfile":
        """
        Firestore에서 받은 딕셔너리로부터 PetProfile을 생성합니다.
        나이는 age_years 또는 age 키에서 읽습니다.
        """
        weight = data.get('weight', data.get('current_weight'))
        return cls(
            breed=data.get('breed') or "",
            age_years=data.get('age_years', data.get('age')),
            weight=str(weight) if weight not in (None, "") else None,
            name=data.get('name'),
            pet_id=data.get('pet_id'),
        )


def parse_age_years(value: Any) -> Optional[float]:
    """
    나이 값을 float로 변환합니다.
    None/빈 문자열은 '정보 없음'으로 처리하고, 숫자로 해석할 수 없는 값은 ValidationError.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"age_years는 숫자여야 합니다: {value!r}", 'age_years')
    if isinstance(value, (int, float)):
        age = float(value)
    elif isinstance(value, str):
        try:
            age = float(value.strip())
        except ValueError:
            raise ValidationError(f"age_years는 숫자여야 합니다: {value!r}", 'age_years')
    else:
        raise ValidationError(f"age_years는 숫자여야 합니다: {value!r}", 'age_years')

    if not 0 <= age < float("inf"):  # NaN, 음수, 무한대
        raise ValidationError(f"age_years는 0 이상의 유한한 숫자여야 합니다: {value!r}", "age_years")
    return age
