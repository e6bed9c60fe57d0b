# autopaws/api/pets/services.py
import logging
from typing import Optional
from firebase_admin import firestore

from autopaws.models.pet import PetProfile

class PetProfileService:
    """건강 분석에 필요한 반려동물 프로필 조회와 소유권 확인을 전담하는 서비스."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.pets_ref = self.db.collection('pets')
        logging.info("PetProfileService initialized.")

    def get_pet_by_id_and_owner(self, pet_id: str, user_id: str) -> Optional[PetProfile]:
        """
        반려동물 문서를 가져와 소유자가 일치하면 PetProfile로 변환하여 반환합니다.
        """
        doc = self.pets_ref.document(pet_id).get()
        if doc.exists:
            pet_data = doc.to_dict()
            if pet_data.get('user_id') == user_id:
                pet_data.setdefault('pet_id', pet_id)
                return PetProfile.from_dict(pet_data)
        return None

    def get_pet_profile(self, pet_id: str, user_id: str) -> PetProfile:
        """[소유자 전용] 반려동물 프로필을 조회합니다."""
        pet = self.get_pet_by_id_and_owner(pet_id, user_id)
        if not pet:
            raise PermissionError("프로필을 조회할 권한이 없거나 반려동물을 찾을 수 없습니다.")
        return pet

    def ensure_owner(self, pet_id: str, user_id: str) -> None:
        """[소유자 전용] 프로필 변환 없이 소유권만 확인합니다."""
        doc = self.pets_ref.document(pet_id).get()
        if not doc.exists or doc.to_dict().get('user_id') != user_id:
            raise PermissionError("해당 반려동물의 기록에 접근할 권한이 없거나 반려동물을 찾을 수 없습니다.")
