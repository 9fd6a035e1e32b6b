class Prompts:
    """
    A class to hold predefined prompt templates for LLM interactions.
    """

    # Returned verbatim by the model when the diff has no issues.
    ALL_CLEAR = "Looks good to me!"

    REVIEW_PROMPT = """You are an expert code reviewer. Review the following code diff.
Focus on potential bugs, performance optimizations, and code clarity.
Provide feedback as a concise, bulleted list. If all is well, say "{all_clear}".

Code Diff:
```diff
{diff}
```
"""

    OVERSIZED_DIFF_NOTICE = (
        "This pull request is too large for an automated review."
    )

    @classmethod
    def build_review_prompt(cls, diff: str) -> str:
        return cls.REVIEW_PROMPT.format(all_clear=cls.ALL_CLEAR, diff=diff)
