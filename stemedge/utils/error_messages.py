"""
Utility for converting technical errors to learner-friendly messages.
"""


def format_learner_error(error: Exception) -> str:
    """
    Convert technical errors to friendly, encouraging messages for learners.

    Args:
        error: The exception that occurred

    Returns:
        A friendly, learner-appropriate error message
    """
    error_type = type(error).__name__
    error_message = str(error)

    # Map technical errors to friendly messages
    error_map = {
        "KeyError": "Hmm, I couldn't find that. Let's head back and try again! 🔄",
        "ProgressStoreError": "Your progress couldn't be saved just now, but you can keep going. 💾",
        "OpenAI": "Sirius is having trouble thinking right now. Please try again in a moment. 🤔",
        "APIError": "I'm having trouble reaching the server. Give me a second! 🛰️",
        "RateLimitError": "Whoa, that's a lot of questions at once! Let's slow down for a moment. 😅",
        "timeout": "That's taking too long. Can you try again? ⏱️",
        "Timeout": "That's taking too long. Can you try again? ⏱️",
        "ValidationError": "Hmm, something doesn't look right with that input. Can you try again? ✏️",
        "ValueError": "Oops, that didn't make sense to me. Can you rephrase? 🤷",
        "ConnectionError": "I'm having trouble connecting. Check your internet? 🌐",
        "JSONDecodeError": "I got confused reading that. Can you try again? 📄",
    }

    # Check error type first
    for key, message in error_map.items():
        if key in error_type:
            return message

    # Then check error message content
    for key, message in error_map.items():
        if key.lower() in error_message.lower():
            return message

    # Generic fallback - still friendly!
    return "Something unexpected happened. Mind trying that again? 💪"


def format_auth_error(error: Exception) -> str:
    """Short message for a failed sign-in/sign-out."""
    error_message = str(error).lower()

    if "invalid login credentials" in error_message or "invalid_credentials" in error_message:
        return "That email and password don't match. Please try again."
    if "email not confirmed" in error_message:
        return "Please confirm your email address before signing in."
    if "connection" in error_message or "timeout" in error_message or "timed out" in error_message:
        return "We couldn't reach the sign-in service. Check your internet and try again."

    return "Sign-in failed. Please try again."
