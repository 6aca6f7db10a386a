"""공통 애플리케이션 컴포넌트."""
