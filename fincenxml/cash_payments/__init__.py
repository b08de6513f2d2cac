"""FinCEN Form 8300 elements and codes: cash payments over $10,000 received in a trade or business."""