"""
Built-in practice problem catalog.

Each problem carries starter code that prints the results of a few test
cases, and the output a correct solution produces per language. Output is
compared with ``check_if_tests_passed`` so list spacing differences between
runtimes do not matter.

Dependencies: dataclasses (stdlib)
System role: Static problem data for browsing and code runs
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Problem:
    """A practice problem with per-language starter code and expected output."""

    id: str
    title: str
    difficulty: str
    category: str
    description: str
    examples: list[dict[str, str]] = field(default_factory=list)
    constraints: list[str] = field(default_factory=list)
    starter_code: dict[str, str] = field(default_factory=dict)
    expected_output: dict[str, str] = field(default_factory=dict)


TWO_SUM = Problem(
    id="two-sum",
    title="Two Sum",
    difficulty="easy",
    category="Array • Hash Table",
    description=(
        "Given an array of integers nums and an integer target, return indices "
        "of the two numbers such that they add up to target.\n\n"
        "You may assume that each input would have exactly one solution, and you "
        "may not use the same element twice. You can return the answer in any order."
    ),
    examples=[
        {
            "input": "nums = [2,7,11,15], target = 9",
            "output": "[0,1]",
            "explanation": "Because nums[0] + nums[1] == 9, we return [0, 1].",
        },
        {"input": "nums = [3,2,4], target = 6", "output": "[1,2]"},
        {"input": "nums = [3,3], target = 6", "output": "[0,1]"},
    ],
    constraints=[
        "2 ≤ nums.length ≤ 10⁴",
        "-10⁹ ≤ nums[i] ≤ 10⁹",
        "-10⁹ ≤ target ≤ 10⁹",
        "Only one valid answer exists",
    ],
    starter_code={
        "javascript": (
            "function twoSum(nums, target) {\n"
            "  // Write your solution here\n"
            "  \n"
            "}\n"
            "\n"
            "// Test cases\n"
            "console.log(twoSum([2, 7, 11, 15], 9)); // Expected: [0, 1]\n"
            "console.log(twoSum([3, 2, 4], 6)); // Expected: [1, 2]\n"
            "console.log(twoSum([3, 3], 6)); // Expected: [0, 1]\n"
        ),
        "python": (
            "def twoSum(nums, target):\n"
            "    # Write your solution here\n"
            "    pass\n"
            "\n"
            "# Test cases\n"
            "print(twoSum([2, 7, 11, 15], 9))  # Expected: [0, 1]\n"
            "print(twoSum([3, 2, 4], 6))  # Expected: [1, 2]\n"
            "print(twoSum([3, 3], 6))  # Expected: [0, 1]\n"
        ),
        "java": (
            "import java.util.*;\n"
            "\n"
            "class Solution {\n"
            "    public static int[] twoSum(int[] nums, int target) {\n"
            "        // Write your solution here\n"
            "        \n"
            "        return new int[0];\n"
            "    }\n"
            "    \n"
            "    public static void main(String[] args) {\n"
            "        System.out.println(Arrays.toString(twoSum(new int[]{2, 7, 11, 15}, 9)));\n"
            "        System.out.println(Arrays.toString(twoSum(new int[]{3, 2, 4}, 6)));\n"
            "        System.out.println(Arrays.toString(twoSum(new int[]{3, 3}, 6)));\n"
            "    }\n"
            "}\n"
        ),
    },
    expected_output={
        "javascript": "[0,1]\n[1,2]\n[0,1]",
        "python": "[0, 1]\n[1, 2]\n[0, 1]",
        "java": "[0, 1]\n[1, 2]\n[0, 1]",
    },
)

REVERSE_STRING = Problem(
    id="reverse-string",
    title="Reverse String",
    difficulty="easy",
    category="String • Two Pointers",
    description=(
        "Write a function that reverses a string. The input string is given as "
        "an array of characters s.\n\n"
        "You must do this by modifying the input array in-place with O(1) extra memory."
    ),
    examples=[
        {"input": 's = ["h","e","l","l","o"]', "output": '["o","l","l","e","h"]'},
        {"input": 's = ["H","a","n","n","a","h"]', "output": '["h","a","n","n","a","H"]'},
    ],
    constraints=["1 ≤ s.length ≤ 10⁵", "s[i] is a printable ascii character"],
    starter_code={
        "javascript": (
            "function reverseString(s) {\n"
            "  // Write your solution here\n"
            "  \n"
            "}\n"
            "\n"
            "// Test cases\n"
            'let test1 = ["h","e","l","l","o"];\n'
            "reverseString(test1);\n"
            "console.log(test1);\n"
            "\n"
            'let test2 = ["H","a","n","n","a","h"];\n'
            "reverseString(test2);\n"
            "console.log(test2);\n"
        ),
        "python": (
            "def reverseString(s):\n"
            "    # Write your solution here\n"
            "    pass\n"
            "\n"
            "# Test cases\n"
            'test1 = ["h","e","l","l","o"]\n'
            "reverseString(test1)\n"
            "print(test1)\n"
            "\n"
            'test2 = ["H","a","n","n","a","h"]\n'
            "reverseString(test2)\n"
            "print(test2)\n"
        ),
        "java": (
            "import java.util.*;\n"
            "\n"
            "class Solution {\n"
            "    public static void reverseString(char[] s) {\n"
            "        // Write your solution here\n"
            "        \n"
            "    }\n"
            "    \n"
            "    public static void main(String[] args) {\n"
            "        char[] test1 = {'h','e','l','l','o'};\n"
            "        reverseString(test1);\n"
            "        System.out.println(Arrays.toString(test1));\n"
            "        \n"
            "        char[] test2 = {'H','a','n','n','a','h'};\n"
            "        reverseString(test2);\n"
            "        System.out.println(Arrays.toString(test2));\n"
            "    }\n"
            "}\n"
        ),
    },
    expected_output={
        "javascript": "[ 'o', 'l', 'l', 'e', 'h' ]\n[ 'h', 'a', 'n', 'n', 'a', 'H' ]",
        "python": "['o', 'l', 'l', 'e', 'h']\n['h', 'a', 'n', 'n', 'a', 'H']",
        "java": "[o, l, l, e, h]\n[h, a, n, n, a, H]",
    },
)

VALID_PALINDROME = Problem(
    id="valid-palindrome",
    title="Valid Palindrome",
    difficulty="easy",
    category="String • Two Pointers",
    description=(
        "A phrase is a palindrome if, after converting all uppercase letters into "
        "lowercase letters and removing all non-alphanumeric characters, it reads "
        "the same forward and backward.\n\n"
        "Given a string s, return true if it is a palindrome, or false otherwise."
    ),
    examples=[
        {
            "input": 's = "A man, a plan, a canal: Panama"',
            "output": "true",
            "explanation": '"amanaplanacanalpanama" is a palindrome.',
        },
        {
            "input": 's = "race a car"',
            "output": "false",
            "explanation": '"raceacar" is not a palindrome.',
        },
        {"input": 's = " "', "output": "true"},
    ],
    constraints=[
        "1 ≤ s.length ≤ 2 * 10⁵",
        "s consists only of printable ASCII characters",
    ],
    starter_code={
        "javascript": (
            "function isPalindrome(s) {\n"
            "  // Write your solution here\n"
            "  \n"
            "}\n"
            "\n"
            "// Test cases\n"
            'console.log(isPalindrome("A man, a plan, a canal: Panama")); // Expected: true\n'
            'console.log(isPalindrome("race a car")); // Expected: false\n'
            'console.log(isPalindrome(" ")); // Expected: true\n'
        ),
        "python": (
            "def isPalindrome(s):\n"
            "    # Write your solution here\n"
            "    pass\n"
            "\n"
            "# Test cases\n"
            'print(isPalindrome("A man, a plan, a canal: Panama"))  # Expected: True\n'
            'print(isPalindrome("race a car"))  # Expected: False\n'
            'print(isPalindrome(" "))  # Expected: True\n'
        ),
        "java": (
            "class Solution {\n"
            "    public static boolean isPalindrome(String s) {\n"
            "        // Write your solution here\n"
            "        \n"
            "        return false;\n"
            "    }\n"
            "    \n"
            "    public static void main(String[] args) {\n"
            '        System.out.println(isPalindrome("A man, a plan, a canal: Panama"));\n'
            '        System.out.println(isPalindrome("race a car"));\n'
            '        System.out.println(isPalindrome(" "));\n'
            "    }\n"
            "}\n"
        ),
    },
    expected_output={
        "javascript": "true\nfalse\ntrue",
        "python": "True\nFalse\nTrue",
        "java": "true\nfalse\ntrue",
    },
)

MAXIMUM_SUBARRAY = Problem(
    id="maximum-subarray",
    title="Maximum Subarray",
    difficulty="medium",
    category="Array • Dynamic Programming",
    description=(
        "Given an integer array nums, find the subarray with the largest sum, "
        "and return its sum."
    ),
    examples=[
        {
            "input": "nums = [-2,1,-3,4,-1,2,1,-5,4]",
            "output": "6",
            "explanation": "The subarray [4,-1,2,1] has the largest sum 6.",
        },
        {"input": "nums = [1]", "output": "1"},
        {"input": "nums = [5,4,-1,7,8]", "output": "23"},
    ],
    constraints=["1 ≤ nums.length ≤ 10⁵", "-10⁴ ≤ nums[i] ≤ 10⁴"],
    starter_code={
        "javascript": (
            "function maxSubArray(nums) {\n"
            "  // Write your solution here\n"
            "  \n"
            "}\n"
            "\n"
            "// Test cases\n"
            "console.log(maxSubArray([-2,1,-3,4,-1,2,1,-5,4])); // Expected: 6\n"
            "console.log(maxSubArray([1])); // Expected: 1\n"
            "console.log(maxSubArray([5,4,-1,7,8])); // Expected: 23\n"
        ),
        "python": (
            "def maxSubArray(nums):\n"
            "    # Write your solution here\n"
            "    pass\n"
            "\n"
            "# Test cases\n"
            "print(maxSubArray([-2,1,-3,4,-1,2,1,-5,4]))  # Expected: 6\n"
            "print(maxSubArray([1]))  # Expected: 1\n"
            "print(maxSubArray([5,4,-1,7,8]))  # Expected: 23\n"
        ),
        "java": (
            "class Solution {\n"
            "    public static int maxSubArray(int[] nums) {\n"
            "        // Write your solution here\n"
            "        \n"
            "        return 0;\n"
            "    }\n"
            "    \n"
            "    public static void main(String[] args) {\n"
            "        System.out.println(maxSubArray(new int[]{-2,1,-3,4,-1,2,1,-5,4}));\n"
            "        System.out.println(maxSubArray(new int[]{1}));\n"
            "        System.out.println(maxSubArray(new int[]{5,4,-1,7,8}));\n"
            "    }\n"
            "}\n"
        ),
    },
    expected_output={
        "javascript": "6\n1\n23",
        "python": "6\n1\n23",
        "java": "6\n1\n23",
    },
)

CONTAINER_WITH_MOST_WATER = Problem(
    id="container-with-most-water",
    title="Container With Most Water",
    difficulty="medium",
    category="Array • Two Pointers",
    description=(
        "You are given an integer array height of length n. There are n vertical "
        "lines drawn such that the two endpoints of the ith line are (i, 0) and "
        "(i, height[i]).\n\n"
        "Find two lines that together with the x-axis form a container, such that "
        "the container contains the most water. Return the maximum amount of water "
        "a container can store."
    ),
    examples=[
        {
            "input": "height = [1,8,6,2,5,4,8,3,7]",
            "output": "49",
            "explanation": "The max area of water the container can contain is 49.",
        },
        {"input": "height = [1,1]", "output": "1"},
    ],
    constraints=["n == height.length", "2 ≤ n ≤ 10⁵", "0 ≤ height[i] ≤ 10⁴"],
    starter_code={
        "javascript": (
            "function maxArea(height) {\n"
            "  // Write your solution here\n"
            "  \n"
            "}\n"
            "\n"
            "// Test cases\n"
            "console.log(maxArea([1,8,6,2,5,4,8,3,7])); // Expected: 49\n"
            "console.log(maxArea([1,1])); // Expected: 1\n"
        ),
        "python": (
            "def maxArea(height):\n"
            "    # Write your solution here\n"
            "    pass\n"
            "\n"
            "# Test cases\n"
            "print(maxArea([1,8,6,2,5,4,8,3,7]))  # Expected: 49\n"
            "print(maxArea([1,1]))  # Expected: 1\n"
        ),
        "java": (
            "class Solution {\n"
            "    public static int maxArea(int[] height) {\n"
            "        // Write your solution here\n"
            "        \n"
            "        return 0;\n"
            "    }\n"
            "    \n"
            "    public static void main(String[] args) {\n"
            "        System.out.println(maxArea(new int[]{1,8,6,2,5,4,8,3,7}));\n"
            "        System.out.println(maxArea(new int[]{1,1}));\n"
            "    }\n"
            "}\n"
        ),
    },
    expected_output={
        "javascript": "49\n1",
        "python": "49\n1",
        "java": "49\n1",
    },
)

PROBLEMS: dict[str, Problem] = {
    problem.id: problem
    for problem in (
        TWO_SUM,
        REVERSE_STRING,
        VALID_PALINDROME,
        MAXIMUM_SUBARRAY,
        CONTAINER_WITH_MOST_WATER,
    )
}


def list_problems() -> list[Problem]:
    """Return all problems in catalog order."""
    return list(PROBLEMS.values())


def get_problem(problem_id: str) -> Problem | None:
    """Look up a problem by id, or None if it is not in the catalog."""
    return PROBLEMS.get(problem_id)
