"""Gemini 공통 설정."""

GEMINI_CONNECT_TIMEOUT = 5.0
GEMINI_READ_TIMEOUT = 30.0

# 이미지 다운로드 (URL 입력) 타임아웃
IMAGE_FETCH_TIMEOUT = 15.0
