"""Fixed spoken phrases used by the skill's handlers."""

WELCOME = (
    "Welcome to the banana stand. Would you like a daily reminder at one p. m. to get a banana?"
)
REMINDER_CREATED = "You successfully schedule a daily reminder at one p. m. to get a banana!"
REMINDER_FAILED = "There was an error scheduling your reminder. Please try again later."
GRANT_PERMISSIONS = "Please go to the Alexa mobile app to grant reminders permissions."
PERMISSIONS_DEFERRED = (
    "Ok, no problem. When you are ready, please go to the Alexa mobile app to grant "
    "reminders permissions or launch the skill and I'll ask you again."
)
CONFIRM_REMINDER = (
    "Should I go ahead and schedule a daily reminder at one p. m. for you to get a banana?"
)
DECLINED = "Alrighty, no problem. When you want me to set a reminder for you just holler."
HELP = (
    "To use this skill say open banana stand. Then confirm with yes and a reminder will be "
    "scheduled so you'll get your daily dose of banana!"
)
GOODBYE = "Thanks for trying out Banana Stand. Goodbye!"
PLEASE_REPEAT = "Sorry, I couldn't understand what you said. Please try again."


def intent_reflection(intent_name: str) -> str:
    return f"You just triggered {intent_name}"
