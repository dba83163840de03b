"""Operations exposed on the command line, one subpackage each."""
