"""
Canned replies for the website assistant.

Company facts are injected from configuration, not hardcoded.
"""

from trinexa.config import settings

_co = settings.company

INTRODUCTION = (
    f"I'm the {_co.name}, here to help you learn about our company "
    "and schedule demo sessions for our products."
)

GREETINGS = [
    f"Hello! Welcome to {_co.name}. How can I help you today?",
    "Hi there! I'm here to assist you with questions about our AI solutions.",
]

ABOUT = (
    f"Founded in {_co.founded_year}, {_co.name} was born from a powerful belief: "
    "AI should serve humans, not replace them. We help organizations turn AI into "
    "action, delivering real-world impact through intelligent, human-centered solutions."
)

MISSION = (
    "Our mission is to democratize AI by making advanced artificial intelligence "
    "accessible, practical, and transformative for businesses of all sizes."
)

VISION = (
    "Our vision is to be the global leader in AI innovation, creating a world where "
    "intelligent technology enhances human potential and drives sustainable growth."
)

VALUES = (
    "Our core values are:\n"
    "- Excellence: Every detail matters. We build with care, precision, and passion.\n"
    "- Collaboration: The best ideas emerge when minds meet. We co-create with clients and our teams.\n"
    "- Innovation: We don't follow trends, we create what comes next.\n"
    "- Integrity: We believe in doing what's right, even when no one's watching."
)

PRODUCTS = (
    "We offer two main AI products:\n\n"
    "1. Ayura - Mental Health Management System:\n"
    "A complete platform for counselors and therapists featuring:\n"
    "- Smart Scheduling\n- Online Payments\n- Private Counseling\n"
    "- Session Analytics\n- End-to-End Encryption\n\n"
    "2. NexaKYC - Smart eKYC System:\n"
    "AI-driven identity verification system with:\n"
    "- Instant KYC Checks\n- Rule Alignment\n- Risk Alerts\n"
    "- Adaptive Learning\n- GDPR & Compliance Ready"
)

PURPOSE = (
    "To harness the power of AI and technology to create secure, innovative, and "
    "impactful solutions that improve lives, empower businesses, and shape a better future"
)

CONTACT = f"You can reach us at:\nPhone: {_co.contact_phone}\nLocation: {_co.location}"

FOUNDER = (
    f"{_co.name} was founded by {_co.founder}, who believes that AI isn't about "
    "replacing people - it's about unlocking who we can become with the right tools."
)

THANKS = [
    "You're welcome! If you have any more questions or need further assistance, just let me know!",
    "Happy to help! Let me know if there's anything else you need.",
    "Anytime! If you want to know more or book a demo, just ask.",
]

# Time-of-day greetings, keyed by the phrase that triggers them.
TIME_OF_DAY = {
    "good morning": ("Good morning", "Hope you have a wonderful day ahead! 🌞"),
    "good afternoon": ("Good afternoon", "How can I assist you today? ☀️"),
    "good evening": ("Good evening", "How can I help you this evening? 🌇"),
    "good night": ("Good night", "If you have any questions, feel free to ask. 🌙"),
}

DATETIME_PREFIX = "The current date and time is: "

DEFAULT = (
    "I'm not sure about that. Would you like to schedule a demo session to learn more "
    "about our products? Just type 'demo' and I'll show you our available time slots."
)

# Booking dialogue
CANCELLED = "Booking process cancelled. Is there anything else I can help you with?"
PERSIST_FAILED = (
    "I apologize, but there was an error processing your booking. "
    "Please try again or contact our support team."
)
UNEXPECTED_ERROR = (
    "I apologize, but I encountered an error. "
    "Please try again or contact support if the issue persists."
)
FEEDBACK_PROMPT = f"How was your experience with {_co.name}?"
FEEDBACK_THANKS = "Thank you for your feedback! 😊"
INPUT_TOO_LONG = "That message is quite long. Could you keep it a little shorter?"


def build_nice_to_meet(name: str) -> str:
    return f"Nice to meet you, {name}! How can I help you today?"


def build_time_of_day(trigger: str, name: str | None) -> str:
    """Time-of-day greeting, personalised when the visitor's name is known."""
    salutation, tail = TIME_OF_DAY[trigger]
    if name:
        return f"{salutation}, {name}! {tail}"
    return f"{salutation}! {tail}"


def build_confirmation(day: str, time: str, product: str, attendees: str) -> str:
    """Confirmation read-back sent once a booking is stored."""
    details = "\n".join([
        f"Demo scheduled for {day} at {time}",
        f"Product: {product}",
        f"Attendees: {attendees}",
        "You will receive a confirmation email shortly with meeting details.",
    ])
    return (
        f"Perfect! Here's your booking confirmation:\n\n{details}\n\n"
        "Is there anything else I can help you with?"
    )
