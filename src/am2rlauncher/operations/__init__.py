"""Operations that drive external programs."""
