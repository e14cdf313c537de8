"""Static template bank for daily insights.

Placeholders are written as {name} and filled by render(). Unknown
placeholders are left as-is.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InsightTemplate:
    title: str
    body: str
    badge: str | None = None
    cta: str | None = None


def render(text: str, **values) -> str:
    """Substitute {placeholder} values into text."""
    for key, value in values.items():
        text = text.replace("{" + key + "}", str(value))
    return text


PAIN_TEMPLATES = (
    InsightTemplate(
        "{pain_area} Relief Focus",
        "Your {pain_area} discomfort may be connected to {sedentary} of sitting. Today's resets "
        "target this area with gentle mobility exercises that can help reduce tension buildup.",
        badge="Personalized",
        cta="Start your first reset",
    ),
    InsightTemplate(
        "Targeting Your {pain_area}",
        "Many desk workers experience {pain_area} tension from sustained positioning. Regular "
        "micro-movements can help maintain comfort throughout your workday.",
        cta="See today's plan",
    ),
    InsightTemplate(
        "{pain_area} Care Today",
        "Based on your profile, we've included exercises that often help with {pain_area} "
        "discomfort. Even brief movement breaks can make a noticeable difference.",
        badge="For You",
    ),
    InsightTemplate(
        "Movement for {pain_area}",
        "Desk-related {pain_area} tension typically responds well to consistent, gentle "
        "stretching. Your plan today includes targeted exercises for this area.",
        cta="View exercises",
    ),
    InsightTemplate(
        "{pain_area} + Desk Work",
        "With {sedentary} of daily sitting, your {pain_area} may benefit from movement variety. "
        "Today's resets are designed to address common desk-posture patterns.",
        badge="Customized",
    ),
)

SEDENTARY_TEMPLATES = (
    InsightTemplate(
        "Movement Matters",
        "Sitting {hours} a day can contribute to muscle tension. Breaking this up with brief "
        "resets {timing} may help maintain comfort and energy.",
        badge="Health Tip",
        cta="Start a quick reset",
    ),
    InsightTemplate(
        "Break Up Your Sitting",
        "Research suggests that regular movement breaks during {hours} of sitting can help "
        "reduce stiffness. Your resets are timed to land {timing}.",
    ),
    InsightTemplate(
        "Combat Desk Fatigue",
        "Extended sitting ({hours}) often leads to feeling stiff {timing}. A few minutes of "
        "targeted movement can help reset your body.",
        badge="Did You Know?",
        cta="See how it works",
    ),
    InsightTemplate(
        "Your Sitting Profile",
        "With {hours} of daily desk time, micro-movements become especially valuable. We've "
        "scheduled resets for when you typically feel most stiff.",
        badge="Personalized",
    ),
)

STIFFNESS_TEMPLATES = (
    InsightTemplate(
        "{time} Stiffness Pattern",
        "You mentioned feeling stiffest in the {time}. Your resets are timed to address this, "
        "targeting {focus} when it matters most.",
        badge="Timed for You",
        cta="Check your schedule",
    ),
    InsightTemplate(
        "Best Time to Reset",
        "Since the {time} is when stiffness typically peaks for you, we've prioritized "
        "exercises for {focus} during these hours.",
    ),
    InsightTemplate(
        "{time} Movement Routine",
        "Consistent {time} movement can help address the tension buildup you experience. "
        "Today's plan focuses on {focus}.",
        badge="Smart Timing",
        cta="Start now",
    ),
    InsightTemplate(
        "Timed for Your Body",
        "Your {time} stiffness pattern suggests accumulated tension from sustained "
        "positioning. Brief resets at this time can help.",
    ),
)

PROGRESS_IMPROVING_TEMPLATES = (
    InsightTemplate(
        "You're Improving!",
        "Your weekly average is trending upward. Consistent daily resets are clearly making a "
        "difference. Keep it going!",
        badge="Trending Up",
    ),
    InsightTemplate(
        "Positive Momentum",
        "Your scores show improvement over the past week. This kind of consistency often leads "
        "to noticeable changes in how you feel.",
    ),
    InsightTemplate(
        "Great Progress",
        "Your movement routine is paying off. The upward trend in your scores reflects your "
        "commitment to daily resets.",
        badge="Keep Going",
    ),
)

PROGRESS_STREAK_TEMPLATES = (
    InsightTemplate(
        "{streak}-Day Streak!",
        "You've completed resets {streak} days in a row. This consistency is building healthy "
        "movement habits.",
        badge="On Fire",
        cta="Keep the streak alive",
    ),
    InsightTemplate(
        "Streak Building",
        "Day {streak} of consistent movement! Your body is likely adapting to this healthy "
        "routine.",
    ),
    InsightTemplate(
        "Consistency Wins",
        "A {streak}-day streak shows real commitment. Regular movement often leads to less "
        "stiffness over time.",
        badge="Milestone",
    ),
)

PROGRESS_RESTART_TEMPLATES = (
    InsightTemplate(
        "Fresh Start Today",
        "Ready to get back into your routine? Even one reset can help you feel better. Every "
        "session counts.",
        badge="New Day",
        cta="Start your first reset",
    ),
    InsightTemplate(
        "Pick Up Where You Left Off",
        "It's been a few days since your last reset. No worries, jump back in with today's "
        "plan.",
        cta="See today's plan",
    ),
    InsightTemplate(
        "Let's Get Moving",
        "Your body may be feeling the effects of recent inactivity. A quick reset can help get "
        "things flowing again.",
        cta="Start now",
    ),
)

PROGRESS_GENERAL_TEMPLATES = (
    InsightTemplate(
        "Building Habits",
        "You've completed {sessions} sessions this week. Each one contributes to your overall "
        "comfort and mobility.",
    ),
    InsightTemplate(
        "Week in Review",
        "Your weekly score of {score} reflects your movement consistency. Keep building on this "
        "foundation.",
    ),
)

PLAN_TEMPLATES = (
    InsightTemplate(
        "Today's Focus",
        "You have {session_count} resets planned today, targeting {focus}. Each session is "
        "designed to address your specific needs.",
        badge="Your Plan",
        cta="View full plan",
    ),
    InsightTemplate(
        "Personalized Sessions",
        "Today's {session_count} resets focus on {focus}, the areas you identified during "
        "setup. Ready when you are.",
    ),
    InsightTemplate(
        "Made for You",
        "Based on your profile, today targets {focus} with {session_count} quick sessions "
        "spread throughout your day.",
        badge="Custom Plan",
        cta="See the exercises",
    ),
    InsightTemplate(
        "Your Daily Resets",
        "We've scheduled {session_count} movement breaks to help with {focus}. Short, targeted "
        "sessions that fit your day.",
    ),
)

MOTIVATIONAL_TEMPLATES = (
    InsightTemplate(
        "Small Steps, Big Impact",
        "Just 5 minutes of movement can help shift how your body feels. Your next reset is "
        "ready when you are.",
        badge="Motivation",
        cta="Start a quick reset",
    ),
    InsightTemplate(
        "Your Body Will Thank You",
        "Taking time for movement is an investment in your comfort. A few minutes now can make "
        "a difference for hours.",
    ),
    InsightTemplate(
        "Every Reset Counts",
        "Whether you're feeling stiff or not, regular movement helps maintain flexibility. Keep "
        "building the habit.",
        badge="Daily Tip",
    ),
    InsightTemplate(
        "Move for Energy",
        "Feeling sluggish? A brief movement break can help boost circulation and alertness. "
        "Give it a try.",
        cta="Quick reset",
    ),
    InsightTemplate(
        "Consistency Over Intensity",
        "Short, daily movement sessions often have more impact than occasional long workouts. "
        "You're on the right track.",
        badge="Pro Tip",
    ),
    InsightTemplate(
        "Break the Cycle",
        "Sitting for long periods creates patterns of tension. Regular resets help break this "
        "cycle before discomfort builds.",
    ),
)

RECOVERY_TEMPLATES = (
    InsightTemplate(
        "Rest is Progress",
        "Your muscles adapt and recover between sessions. If you're feeling sore, lighter "
        "movement today can still help.",
        badge="Recovery",
    ),
    InsightTemplate(
        "Listen to Your Body",
        "Some days call for gentle movement rather than intense stretching. Your body knows "
        "what it needs.",
        cta="Try a gentle reset",
    ),
    InsightTemplate(
        "Active Recovery",
        "Light movement on rest days can help maintain flexibility without overtaxing your "
        "body. Balance is key.",
        badge="Wellness Tip",
    ),
    InsightTemplate(
        "Gentle Movement Day",
        "Consider today a maintenance day. Even minimal movement helps keep joints mobile and "
        "muscles happy.",
    ),
)

WORK_TEMPLATES = (
    InsightTemplate(
        "Desk Posture Check",
        "Working at {work_type} often leads to subtle posture shifts throughout the day. Your "
        "resets help counteract these patterns.",
        badge="Workspace Tip",
    ),
    InsightTemplate(
        "Work Smart, Move Often",
        "Working at {work_type} means extended sitting is part of your day. Strategic movement "
        "breaks can help maintain comfort.",
    ),
    InsightTemplate(
        "Environment Matters",
        "Whether you're at {work_type} or elsewhere, brief movement resets help your body adapt "
        "to sustained positions.",
        badge="Did You Know?",
    ),
    InsightTemplate(
        "Desk-Friendly Exercises",
        "Today's resets are designed for {work_type}. Discreet, effective movements you can do "
        "anywhere.",
        badge="Practical",
        cta="View exercises",
    ),
)
