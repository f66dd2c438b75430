import os

# Search methods in the order they are listed and compared
METHODS = ["DFS", "BFS", "GBFS", "AS", "CUS1", "CUS2"]

# Maximum depth pushed onto the CUS1 frontier
DEPTH_LIMIT = int(os.getenv("MAZE_DEPTH_LIMIT", "10"))

# Folder of sample mazes offered by the app
TEST_CASE_FOLDER = os.getenv("MAZE_TEST_CASE_FOLDER", "Test_Cases_Maze")
DEFAULT_MAZE = os.path.join(TEST_CASE_FOLDER, "RobotNav-test.txt")

# Appended after every direction when a path is printed
DIRECTION_SEPARATOR = "; "
