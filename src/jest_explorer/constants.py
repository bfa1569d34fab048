"""Reserved tokens shared by identifier building and filter parsing."""

# Separates the file portion of an identifier from the test portion.
TEST_ID_SEPARATOR = "##"

# Separates describe-block segments from each other.
DESCRIBE_ID_SEPARATOR = "::"

ROOT_ID = "root"
ROOT_LABEL = "Jest"

NO_NAME_LABEL = "test has no name"
