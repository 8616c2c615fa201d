"""Tour Service.

한국관광공사 공공 데이터 기반 관광지 탐색 서비스.
"""
