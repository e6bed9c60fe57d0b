# autopaws/core/config.py

import os

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # JWT 토큰 서명 검증용 키. 토큰 발급은 별도 인증 서비스가 담당합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    # Firestore 연결 여부. 테스트 환경에서는 끄고 가짜 서비스를 주입합니다.
    FIREBASE_ENABLED = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

class DevelopmentConfig(Config):
    """개발 환경 설정. 코드 변경 시 자동 재시작과 상세 디버그 정보를 제공합니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)

class TestingConfig(Config):
    """테스트 환경 설정."""
    TESTING = True
    DEBUG = False
    FIREBASE_ENABLED = False
    JWT_SECRET_KEY = os.getenv('TEST_JWT_SECRET_KEY', 'test-secret-key-for-autopaws-tests')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

class ProductionConfig(Config):
    DEBUG = False

# FLASK_ENV 값으로 설정 클래스를 선택하기 위한 매핑
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
