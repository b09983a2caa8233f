def policy(env):
    # Strategy: look at asteroids that will reach the ship's row within the next
    # second and steer away from the closest horizontal threat. With no threat,
    # drift toward the lowest star still above the ship, otherwise hold still.
    state = env.state
    player = state.player
    cfg = state.config
    danger_width = player.radius * 2.5

    threat = None
    for a in state.asteroids:
        gap = player.y - a.y
        if gap < -a.radius or a.vy <= 0:
            continue
        if gap / a.vy > 1.0:
            continue
        dx = a.x - player.x
        if abs(dx) < a.radius + danger_width and (threat is None or abs(dx) < abs(threat)):
            threat = dx

    if threat is not None:
        if player.x - cfg.min_x < danger_width:
            return [4, 0, 0]
        if cfg.max_x - player.x < danger_width:
            return [3, 0, 0]
        return [3, 0, 0] if threat > 0 else [4, 0, 0]

    targets = [s for s in state.stars if s.y < player.y]
    if targets:
        star = max(targets, key=lambda s: s.y)
        dx = star.x - player.x
        if abs(dx) > 4:
            return [4, 0, 0] if dx > 0 else [3, 0, 0]
    return [0, 0, 0]
